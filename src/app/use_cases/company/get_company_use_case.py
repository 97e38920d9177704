import logging
from uuid import UUID

from libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from .dtos import CompanyInfo, CompanyResponse

logger = logging.getLogger(__name__)


class GetCompanyUseCase:
    """
    Reads the company the authenticated portal user belongs to.

    Business Rules:
    - Scoped to the caller's own company_id, never a client-supplied id
    - A user whose company row is gone gets COMPANY_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[CompanyResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                logger.warning(f"Company {company_id} of an authenticated user is missing")
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found."))

            info = CompanyInfo.model_validate({**company.model_dump(), "id": str(company.id)})

        return Return.ok(CompanyResponse(company=info))
