import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ideaspark.core.auth_dependency import get_auth_service
from ideaspark.core.logging_config import sanitize_log_data
from ideaspark.schemas.auth import AuthResponse, MessageResponse, SigninRequest, SignupRequest
from ideaspark.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# ✅ USER SIGNUP
@router.post("/signup", response_model=AuthResponse)
def signup(payload: SignupRequest, auth: AuthService = Depends(get_auth_service)):
    logger.debug(f"Signup request: {sanitize_log_data(payload.model_dump())}")

    user, token = auth.sign_up(payload.email, payload.password, payload.full_name)

    return {"user": user.to_public_dict(), "token": token}


# ✅ USER SIGN-IN
@router.post("/signin", response_model=AuthResponse)
def signin(payload: SigninRequest, auth: AuthService = Depends(get_auth_service)):
    logger.debug(f"Sign-in request: {sanitize_log_data(payload.model_dump())}")

    user, token = auth.sign_in(payload.email, payload.password)

    return {"user": user.to_public_dict(), "token": token}


# ✅ SIGN-OUT (stateless, the client discards its token)
@router.post("/signout", response_model=MessageResponse)
def signout():
    return {"message": "Signed out successfully"}


# Google sign-in placeholder
@router.get("/google")
def google_signin():
    return JSONResponse(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        content={"error": "Google sign-in not available in this version"},
    )
