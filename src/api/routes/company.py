from fastapi import APIRouter, Depends, status

from src.api.error import COMPANY_ERROR_STATUS, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import Identity
from src.app.use_cases.company import CompanyResponse, GetCompanyUseCase
from src.depends import get_current_identity, get_unit_of_work

router = APIRouter(tags=["Company"])


@router.get("/company", status_code=status.HTTP_200_OK, response_model=CompanyResponse)
async def get_company(
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current Company

    Returns the profile of the company the caller belongs to, with both the
    structured address fields and the flattened address lines.

    Raises:
        - 401 Unauthorized: missing or invalid token, or user deactivated
        - 404 Not Found: the company row no longer exists
    """
    result = await GetCompanyUseCase(uow).execute(identity.company_id)
    if result.is_err():
        raise_for_error(result.error, COMPANY_ERROR_STATUS)

    return result.value
