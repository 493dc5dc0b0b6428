"""
User Schemas

Pydantic schema for the sign-up form and helpers for turning
validation failures into per-field messages.
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from usermanagement.core.config import settings

# Key used for errors that don't belong to a single field
FORM_ERROR_KEY = "__all__"

PASSWORD_FIELDS = frozenset({"password", "confirm_password"})

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=15)]
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
RoleName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]


class UserForm(BaseModel):
    """
    Sign-up form submitted to POST /signup.

    Every field has an empty default so a missing field is reported as a
    constraint failure on that field rather than a missing key.
    """

    model_config = ConfigDict(
        validate_default=True,
        extra="ignore",
    )

    id: str | None = None
    first_name: PersonName = ""
    last_name: PersonName = ""
    email: EmailStr = ""
    username: Username = ""
    password: str = Field("", min_length=1, max_length=128)
    confirm_password: str = Field("", min_length=1, max_length=128)
    role: RoleName = settings.default_role_name

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        """Confirm password must equal password."""
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError(
                "password_mismatch",
                "Password and confirm password do not match",
            )
        return value

    @classmethod
    def empty(cls) -> "UserForm":
        """Blank form for the initial GET, skipping validation."""
        return cls.model_construct()

    @classmethod
    def from_submitted(cls, data: Mapping[str, Any]) -> "UserForm":
        """
        Rebuild a form from raw submitted values without validating them.

        Used to re-render the form after a failed submission. Password
        fields are never echoed back.
        """
        values = {
            name: value
            for name, value in data.items()
            if name in cls.model_fields and name not in PASSWORD_FIELDS and isinstance(value, str)
        }
        return cls.model_construct(**values)

    def without_passwords(self) -> "UserForm":
        """Copy of this form with password fields cleared."""
        return self.model_copy(update={name: "" for name in PASSWORD_FIELDS})


def form_errors(exc: ValidationError) -> dict[str, list[str]]:
    """
    Group validation errors by field name.

    Args:
        exc: The pydantic validation error

    Returns:
        Mapping of field name to its messages, in the order reported.
        Errors without a field location are stored under FORM_ERROR_KEY.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else FORM_ERROR_KEY
        errors.setdefault(field, []).append(error["msg"])
    return errors
