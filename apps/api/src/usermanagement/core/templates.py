"""
Template Rendering

Jinja2 environment for the server-rendered views.
"""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# View names
INDEX_VIEW = "index"
SIGNUP_VIEW = "user-form/user-signup"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def template_name(view: str) -> str:
    """Map a view name to its template file."""
    return f"{view}.html"


def render(request: Request, view: str, context: dict | None = None) -> HTMLResponse:
    """
    Render a view with the given context.

    Args:
        request: The current request
        view: View name, e.g. "index" or "user-form/user-signup"
        context: Template context (model attributes)

    Returns:
        An HTML response with status 200
    """
    return templates.TemplateResponse(request, template_name(view), context or {})
