"""
Sign-Up Router

Server-rendered sign-up flow.

Endpoints:
- GET /signup - Render the empty sign-up form with the assignable roles
- POST /signup - Validate the submitted form and create the user

Outcomes of POST /signup:
- Form fails validation: the sign-up form is re-rendered with per-field
  errors and the user service is not called
- User created: the index view is rendered
- Service rejects a field: the error is attached to that field and the
  index view is rendered
- Any other failure: a fixed form-level error message is set and the
  index view is rendered; details only go to the log
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from usermanagement.core.config import settings
from usermanagement.core.database import get_db
from usermanagement.core.templates import INDEX_VIEW, SIGNUP_VIEW, render
from usermanagement.modules.roles.repository import RoleRepository
from usermanagement.modules.users import service
from usermanagement.modules.users.schemas import UserForm, form_errors
from usermanagement.modules.users.service import FieldValidationError, UserServiceError

logger = logging.getLogger(__name__)

# Shown for failures whose details must stay in the logs
GENERIC_SIGNUP_ERROR = "Sign-up failed, please try again."

router = APIRouter()


async def _render_signup_form(
    request: Request,
    db: AsyncSession,
    user_form: UserForm,
    errors: dict[str, list[str]],
) -> HTMLResponse:
    """Render the sign-up form with the role list."""
    roles = await RoleRepository.find_all(db)
    default_role = await RoleRepository.find_by_name(db, settings.default_role_name)

    return render(
        request,
        SIGNUP_VIEW,
        {
            "signup": True,
            "user_form": user_form,
            "roles": roles,
            "default_role": default_role,
            "errors": errors,
        },
    )


@router.get(
    "/signup",
    response_class=HTMLResponse,
    summary="Sign-Up Form",
    description="Render the empty sign-up form together with the assignable roles.",
)
async def get_signup_form(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> HTMLResponse:
    """
    Render the empty sign-up form.

    Args:
        request: The current request
        db: Database session (injected)

    Returns:
        The user-form/user-signup view
    """
    return await _render_signup_form(request, db, UserForm.empty(), {})


@router.post(
    "/signup",
    response_class=HTMLResponse,
    summary="Submit Sign-Up Form",
    description="""
Validate the submitted sign-up form and create the user.

Invalid input re-renders the sign-up form with field errors.
Every other outcome renders the index view, including failures
reported by the user service.
""",
)
async def post_signup(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> HTMLResponse:
    """
    Handle a sign-up form submission.

    Args:
        request: The current request carrying the form-encoded body
        db: Database session (injected)

    Returns:
        The user-form/user-signup view on validation failure, else the index view
    """
    submitted = await request.form()

    try:
        user_form = UserForm.model_validate(dict(submitted))
    except ValidationError as e:
        field_errors = form_errors(e)
        logger.info(f"Sign-up form rejected: fields={sorted(field_errors)}")
        return await _render_signup_form(
            request, db, UserForm.from_submitted(submitted), field_errors
        )

    errors: dict[str, list[str]] = {}
    form_error_message: str | None = None
    signup_success = False

    try:
        await service.create_user(db, user_form)
        signup_success = True
    except FieldValidationError as e:
        logger.info(f"Sign-up rejected by service: field={e.field_name}, reason={e.message}")
        errors.setdefault(e.field_name, []).append(e.message)
    except UserServiceError as e:
        logger.error(f"User service error: {e.message}")
        await db.rollback()
        form_error_message = e.message
    except Exception as e:
        logger.exception(f"Unexpected error during sign-up: {e}")
        await db.rollback()
        form_error_message = GENERIC_SIGNUP_ERROR

    return render(
        request,
        INDEX_VIEW,
        {
            "user_form": user_form.without_passwords(),
            "errors": errors,
            "signup_success": signup_success,
            "form_error_message": form_error_message,
        },
    )
