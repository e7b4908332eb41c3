import pytest

from chatlink.forms import (
    FIELDS_REQUIRED,
    USERNAME_REQUIRED,
    ValidationError,
    validate_login,
    validate_registration,
)

password = "password"


def test_login_requires_username():
    with pytest.raises(ValidationError) as info:
        validate_login("", password)
    assert str(info.value) == "Tên đăng nhập không được để trống"


def test_login_requires_password():
    with pytest.raises(ValidationError) as info:
        validate_login("alice", "")
    assert str(info.value) == "Mật khẩu không được để trống"


def test_login_username_checked_first():
    with pytest.raises(ValidationError) as info:
        validate_login("", "")
    assert str(info.value) == USERNAME_REQUIRED


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_login("alice", "")


def test_login_whitespace_username_is_not_trimmed():
    assert validate_login(" ", password) is None


def test_registration_returns_trimmed_name_and_username():
    result = validate_registration("  Alice Smith ", "\talice\n", password, password)
    assert result == ("Alice Smith", "alice")


@pytest.mark.parametrize(
    "fields",
    [
        ("   ", "alice", password, password),
        ("Alice", "  ", password, password),
        ("Alice", "alice", "", password),
        ("Alice", "alice", password, ""),
    ],
)
def test_registration_requires_every_field(fields):
    with pytest.raises(ValidationError) as info:
        validate_registration(*fields)
    assert str(info.value) == "Vui lòng điền đầy đủ thông tin!"


def test_registration_passwords_must_match():
    confirm_password = "secret"
    with pytest.raises(ValidationError) as info:
        validate_registration("Alice", "alice", password, confirm_password)
    assert str(info.value) == "Mật khẩu không khớp!"


def test_missing_field_reported_before_mismatch():
    with pytest.raises(ValidationError) as info:
        validate_registration("", "alice", password, "secret")
    assert str(info.value) == FIELDS_REQUIRED


def test_registration_passwords_are_not_trimmed():
    with pytest.raises(ValidationError) as info:
        validate_registration("Alice", "alice", password, password + " ")
    assert str(info.value) == "Mật khẩu không khớp!"


def test_registration_whitespace_password_is_kept():
    assert validate_registration("Alice", "alice", " ", " ") == ("Alice", "alice")


def test_login_password_message_used():
    with pytest.raises(ValidationError) as info:
        validate_login("bob", "")
    assert str(info.value) == "Mật khẩu không được để trống"