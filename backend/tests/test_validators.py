import pytest

from app.client.validators import sanitize, validate_email, validate_name, validate_password


@pytest.mark.parametrize("email", ["a@b.co", "first.last@example.com", "x+y@sub.domain.org"])
def test_valid_emails(email):
    assert validate_email(email).valid


@pytest.mark.parametrize(
    "email, message",
    [
        ("", "Email is required"),
        ("   ", "Email is required"),
        ("no-at-sign.com", "Please enter a valid email address"),
        ("a@b@c.com", "Please enter a valid email address"),
        ("a@nodot", "Please enter a valid email address"),
        ("a b@c.com", "Please enter a valid email address"),
        ("a@b.co\n", "Please enter a valid email address"),
    ],
)
def test_invalid_emails(email, message):
    result = validate_email(email)
    assert not result.valid
    assert result.message == message


@pytest.mark.parametrize(
    "password, message",
    [
        ("", "Password is required"),
        ("Ab1", "Password must be at least 8 characters"),
        ("abcdefg1", "Password must contain an uppercase letter"),
        ("ABCDEFG1", "Password must contain a lowercase letter"),
        ("Abcdefgh", "Password must contain a number"),
        # 길이 규칙이 가장 먼저 보고된다
        ("abc", "Password must be at least 8 characters"),
    ],
)
def test_strict_password_reports_first_failure(password, message):
    result = validate_password(password, strict=True)
    assert not result.valid
    assert result.message == message


def test_strict_password_accepts_strong_password():
    assert validate_password("Secret123").valid


def test_lenient_password_only_requires_value():
    assert validate_password("x", strict=False).valid
    assert validate_password("", strict=False).message == "Password is required"


@pytest.mark.parametrize("name", ["Jo", "Mary-Jane Smith", "A" * 50])
def test_valid_names(name):
    assert validate_name(name).valid


@pytest.mark.parametrize("name", ["J", "A" * 51, "R2D2", "O'Brien"])
def test_invalid_names(name):
    result = validate_name(name)
    assert not result.valid
    assert result.message.startswith("Name must be 2-50 characters")


def test_empty_name():
    assert validate_name("").message == "Name is required"


def test_sanitize():
    assert sanitize("  jane@example.com \n") == "jane@example.com"
    assert sanitize(None) == ""
