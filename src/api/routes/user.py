from fastapi import APIRouter, Depends, status

from src.app.use_cases.auth import Identity, MeResponse, UserInfo
from src.depends import get_current_identity

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(identity: Identity = Depends(get_current_identity)):
    """
    Current User

    Returns the portal user behind the bearer token. The user is re-read
    from the database on every call by the authentication dependency.

    Raises:
        - 401 Unauthorized: missing or invalid token, or user deactivated
    """
    return MeResponse(
        user=UserInfo(
            id=str(identity.user_id),
            email=identity.email,
            role=identity.role,
            company_id=str(identity.company_id),
        )
    )
