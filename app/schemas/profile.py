from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from .auth import check_email, check_password


class ProfileUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    email: Optional[str] = None
    password: Optional[str] = None
    date_of_birth: Optional[date] = Field(default=None, alias="dateOfBirth")

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        return check_email(v) if v is not None else v

    @field_validator("password")
    @classmethod
    def _password(cls, v):
        return check_password(v) if v is not None else v


class AdminStatusRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: constr(strip_whitespace=True, min_length=1)
    is_admin: bool = Field(alias="isAdmin")
