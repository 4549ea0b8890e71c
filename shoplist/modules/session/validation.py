"""
Registration and login form validators.

Pure functions returning a ValidationResult that maps each offending field
to its first error message. Rendering those messages is the caller's job.
"""

import re

from .models import ValidationResult

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^\+?[\d\s\-()]{10,}$")


def validate_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def password_errors(password: str) -> list[str]:
    """Every rule the password breaks, in the order they are checked."""
    errors = []
    if len(password) < 8:
        errors.append("Password must be at least 8 characters long")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")
    return errors


def validate_password(password: str) -> bool:
    return not password_errors(password)


def validate_phone_number(phone: str) -> bool:
    return bool(_PHONE_RE.match(phone))


def validate_name(name: str) -> bool:
    return len(name.strip()) >= 2


def validate_registration_form(
    email: str,
    password: str,
    confirm_password: str,
    first_name: str,
    last_name: str,
    cell_phone: str,
) -> ValidationResult:
    """Validate the full registration form."""
    errors: dict[str, str] = {}

    if not email:
        errors["email"] = "Email is required"
    elif not validate_email(email):
        errors["email"] = "Please enter a valid email address"

    if not password:
        errors["password"] = "Password is required"
    else:
        problems = password_errors(password)
        if problems:
            errors["password"] = problems[0]

    if not confirm_password:
        errors["confirm_password"] = "Please confirm your password"
    elif password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"

    if not first_name:
        errors["first_name"] = "First name is required"
    elif not validate_name(first_name):
        errors["first_name"] = "First name must be at least 2 characters long"

    if not last_name:
        errors["last_name"] = "Last name is required"
    elif not validate_name(last_name):
        errors["last_name"] = "Last name must be at least 2 characters long"

    if not cell_phone:
        errors["cell_phone"] = "Cell phone number is required"
    elif not validate_phone_number(cell_phone):
        errors["cell_phone"] = "Please enter a valid phone number"

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_login_form(email: str, password: str) -> ValidationResult:
    errors: dict[str, str] = {}

    if not email:
        errors["email"] = "Email is required"
    elif not validate_email(email):
        errors["email"] = "Please enter a valid email address"

    if not password:
        errors["password"] = "Password is required"

    return ValidationResult(is_valid=not errors, errors=errors)
