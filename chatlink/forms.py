"""Checks on the login and registration forms before anything is sent."""

from __future__ import annotations

USERNAME_REQUIRED = "Tên đăng nhập không được để trống"
FIELDS_REQUIRED = "Vui lòng điền đầy đủ thông tin!"


class ValidationError(ValueError):
    """Raised when a form is filled in incompletely or inconsistently."""


def validate_login(username: str, password: str) -> None:
    """Check the login form; the username is checked before the password."""
    if not username:
        raise ValidationError(USERNAME_REQUIRED)
    if not password:
        raise ValidationError("Mật khẩu không được để trống")


def validate_registration(
    full_name: str, username: str, password: str, confirm_password: str
) -> tuple[str, str]:
    """Check the registration form and return the trimmed full name and username.

    The name and username must not be blank once surrounding whitespace is
    removed; the passwords are taken as typed and must both be given and match.
    """
    full_name = full_name.strip()
    username = username.strip()
    if not full_name or not username or not password or not confirm_password:
        raise ValidationError(FIELDS_REQUIRED)
    if password != confirm_password:
        raise ValidationError("Mật khẩu không khớp!")
    return full_name, username