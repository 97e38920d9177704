from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.company_repository import ICompanyRepository
from src.domain.entities import Company


class CompanyRepository(ICompanyRepository):
    """Company repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        stmt = select(Company).where(Company.id == company_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_code(self, company_code: str) -> Optional[Company]:
        stmt = select(Company).where(Company.company_code == company_code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, company: Company) -> Company:
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company
