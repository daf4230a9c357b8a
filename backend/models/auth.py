from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    # Any: a non-string credential is a failed login, not a malformed request
    username: Optional[Any] = None
    password: Optional[Any] = None


class LoginResponse(BaseModel):
    success: bool
    message: str


class StatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_logged_in: bool = Field(alias="isLoggedIn")


class MessageResponse(BaseModel):
    message: str
