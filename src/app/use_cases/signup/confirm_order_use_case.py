import logging
from typing import Optional

from libs.result import Error, Result, Return
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from config import ApplicationConfig
from src.app.services.credentials import reauthenticate
from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.draft_store import ISignupDraftStore
from src.domain.entities import Company, CompanyDraft, PortalUser, SignupDraft, UserRole
from src.domain.validation import build_address_line, make_company_code, parse_int_in_range
from .dtos import ConfirmOrderCommand, ConfirmOrderResponse, CreatedIds
from .pricing import OrderPricing

logger = logging.getLogger(__name__)

COMPANY_CODE_ATTEMPTS = 5

EMAIL_TAKEN = Error("EMAIL_ALREADY_EXISTS", "Email already registered")


class ConfirmOrderUseCase:
    """
    Signup Step 3 - order confirmation and commit

    Business Logic:
    1. Resolve the draft and re-authenticate
    2. Require explicit acceptance of the sales terms
    3. Quote the order: startup fee + clamped extra plates x plate price
    4. Take the draft out of the store (only one caller can ever get it)
    5. In one transaction: re-check email uniqueness, insert the company,
       insert the admin user referencing it, commit
    6. A uniqueness violation becomes EMAIL_ALREADY_EXISTS when the email
       is registered by now; any other failure rolls back and restores the
       draft for a retry (INTERNAL_ERROR, or re-raised when unexpected)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        draft_store: ISignupDraftStore,
        pricing: OrderPricing,
        redirect_url: str = ApplicationConfig.SIGNUP_REDIRECT_URL,
    ):
        self.uow = uow
        self.draft_store = draft_store
        self.pricing = pricing
        self.redirect_url = redirect_url

    async def execute(self, command: ConfirmOrderCommand) -> Result[ConfirmOrderResponse]:
        resolved = await self.draft_store.get(command.signup_token)
        if resolved.is_err():
            return resolved

        if not reauthenticate(resolved.value, command.email, command.password):
            return Return.err(Error("INVALID_SIGNUP_CREDENTIALS", "Invalid signup data"))

        if command.sales_terms is not True:
            return Return.err(Error("TERMS_NOT_ACCEPTED", "Sales terms must be accepted"))

        quantity = parse_int_in_range(
            command.extra_plates, 0, self.pricing.max_extra_plates, default=0
        )
        order = self.pricing.quote(quantity)

        taken = await self.draft_store.commit_and_remove(
            command.signup_token, command.email, command.password
        )
        if taken.is_err():
            return taken

        draft = taken.value
        persisted = await self._persist(draft)
        if persisted.is_err():
            return persisted

        user = persisted.value
        logger.info(
            f"Signup draft {draft.token[:8]} committed: company {user.company_id}, user {user.id}"
        )

        return Return.ok(
            ConfirmOrderResponse(
                redirect_url=self.redirect_url,
                order=order,
                created=CreatedIds(user_id=str(user.id), company_id=str(user.company_id)),
            )
        )

    async def _persist(self, draft: SignupDraft) -> Result[PortalUser]:
        try:
            async with self.uow:
                # Closes the race window between step 1 and now
                if await self.uow.users.get_by_email(draft.email):
                    return Return.err(EMAIL_TAKEN)

                company_code = await self._allocate_company_code(
                    draft.company_draft.company_name
                )
                if company_code is None:
                    logger.error(f"No free company code for draft {draft.token[:8]}")
                    await self.draft_store.restore(draft)
                    return Return.err(Error("INTERNAL_ERROR", "Could not allocate company code"))

                company = await self.uow.companies.create(
                    self._build_company(draft.company_draft, company_code)
                )

                profile = draft.company_draft
                user = await self.uow.users.create(
                    PortalUser(
                        company_id=company.id,
                        email=draft.email,
                        password_hash=draft.password_hash,
                        full_name=f"{profile.contact_first_name} {profile.contact_last_name}",
                        role=UserRole.admin,
                        is_active=True,
                    )
                )

                # Commit transaction atomically
                await self.uow.commit()
                return Return.ok(user)

        except IntegrityError:
            if await self._email_registered(draft.email):
                logger.warning(f"Signup draft {draft.token[:8]} lost the race for {draft.email}")
                return Return.err(EMAIL_TAKEN)
            # Another unique key, e.g. company_code, collided
            logger.warning(f"Signup draft {draft.token[:8]} hit a uniqueness violation")
            await self.draft_store.restore(draft)
            return Return.err(Error("INTERNAL_ERROR", "Signup could not be completed"))
        except SQLAlchemyError:
            logger.exception(f"Signup draft {draft.token[:8]} commit failed")
            await self.draft_store.restore(draft)
            return Return.err(Error("INTERNAL_ERROR", "Signup could not be completed"))
        except Exception:
            logger.error(f"Signup draft {draft.token[:8]} restored after an unexpected error")
            await self.draft_store.restore(draft)
            raise

    async def _email_registered(self, email: str) -> bool:
        try:
            async with self.uow:
                return await self.uow.users.get_by_email(email) is not None
        except SQLAlchemyError:
            logger.exception(f"Could not re-check {email} after a uniqueness violation")
            return False

    async def _allocate_company_code(self, company_name: str) -> Optional[str]:
        for _ in range(COMPANY_CODE_ATTEMPTS):
            code = make_company_code(company_name)
            if await self.uow.companies.get_by_code(code) is None:
                return code
        return None

    @staticmethod
    def _build_company(profile: CompanyDraft, company_code: str) -> Company:
        registered = profile.registered_address
        delivery = profile.effective_delivery_address

        return Company(
            company_code=company_code,
            name=profile.company_name,
            enterprise_number=profile.enterprise_number,
            website=profile.website or None,
            estimated_user_count=profile.employees_count,
            contact_first_name=profile.contact_first_name,
            contact_last_name=profile.contact_last_name,
            contact_phone=profile.contact_phone or None,
            registered_contact_person=profile.contact_person,
            delivery_contact_person=profile.effective_delivery_contact,
            registered_street=registered.street,
            registered_box=registered.box or None,
            registered_postal_code=registered.postal_code,
            registered_city=registered.city,
            registered_country_code=registered.country_code,
            registered_address=build_address_line(
                registered.street,
                registered.box,
                registered.postal_code,
                registered.city,
                registered.country_code,
            ),
            delivery_street=delivery.street,
            delivery_box=delivery.box or None,
            delivery_postal_code=delivery.postal_code,
            delivery_city=delivery.city,
            delivery_country_code=delivery.country_code,
            delivery_address=build_address_line(
                delivery.street,
                delivery.box,
                delivery.postal_code,
                delivery.city,
                delivery.country_code,
            ),
            billing_email=profile.billing_info.email,
            billing_reference=profile.billing_info.reference or None,
        )
