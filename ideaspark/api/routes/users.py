from fastapi import APIRouter, Depends

from ideaspark.core.auth_dependency import get_auth_service, get_current_claims
from ideaspark.core.security import TokenClaims
from ideaspark.schemas.auth import UserOut
from ideaspark.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/user", response_model=UserOut)
def get_user(
    claims: TokenClaims = Depends(get_current_claims),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Profile of the signed-in user.

    401 without a token, 403 for an invalid or expired one, 404 when the
    account no longer exists.
    """
    user = auth.current_user(claims.user_id)
    return user.to_public_dict()
