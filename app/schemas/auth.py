import re
from pydantic import BaseModel, constr, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_RULE = (
    "Password must contain at least 8 characters, including uppercase, "
    "lowercase, number, and special character"
)


def check_email(value: str) -> str:
    value = (value or "").strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please provide a valid email address")
    return value


def check_password(value: str) -> str:
    if (
        len(value) < 8
        or not re.search(r"[a-z]", value)
        or not re.search(r"[A-Z]", value)
        or not re.search(r"[0-9]", value)
        or not re.search(r"[^A-Za-z0-9]", value)
    ):
        raise ValueError(PASSWORD_RULE)
    # bcrypt only looks at the first 72 bytes
    if len(value.encode("utf-8")) > 72:
        raise ValueError("Password must be at most 72 bytes long")
    return value


class SignUpRequest(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=100)
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return check_email(v)

    @field_validator("password")
    @classmethod
    def _password(cls, v):
        return check_password(v)


class SignInRequest(BaseModel):
    email: constr(strip_whitespace=True, min_length=1)
    password: constr(min_length=1)
