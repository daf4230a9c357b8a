import logging
from typing import Any, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

import store
from errors import Unauthorized
from models.auth import LoginRequest, LoginResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ---------- Guard ----------

def require_admin() -> None:
    """Dependency for every employee route. Raises Unauthorized (401) when logged out."""
    try:
        store.gate.guard()
    except Unauthorized:
        logger.warning("Rejected request: admin not logged in")
        raise


# ---------- Endpoints ----------

@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": LoginResponse}},
)
async def login(body: Optional[Any] = Body(default=None)):
    """
    Checks the supplied credentials against the configured admin account.
    A failed attempt also logs out any existing session.
    """
    # Any JSON value is accepted; anything but an object carries no credentials
    credentials = LoginRequest.model_validate(body) if isinstance(body, dict) else LoginRequest()

    if store.gate.login(credentials.username, credentials.password):
        logger.info("Admin logged in successfully.")
        return LoginResponse(success=True, message="Login successful")

    logger.info("Admin login failed.")
    return JSONResponse(
        status_code=401,
        content=LoginResponse(success=False, message="Invalid credentials").model_dump(),
    )


@router.post("/logout", response_model=LoginResponse)
async def logout():
    store.gate.logout()
    logger.info("Admin logged out.")
    return LoginResponse(success=True, message="Logout successful")


@router.get("/status", response_model=StatusResponse)
async def status():
    """Lets the frontend check login state on page load."""
    return StatusResponse(is_logged_in=store.gate.status())
