import logging

from libs.result import Result, Return

from src.app.stores.draft_store import ISignupDraftStore
from .dtos import CaptureCompanyCommand, CaptureCompanyResponse

logger = logging.getLogger(__name__)


class CaptureCompanyUseCase:
    """
    Signup Step 2 - company profile capture

    Business Logic:
    1. Resolve the draft (unknown or expired token -> SIGNUP_SESSION_EXPIRED)
    2. Re-authenticate with the resubmitted email and password
    3. Require PENDING_STEP2
    4. Validate and normalize company, contact, billing and address fields;
       a distinct delivery address is all-or-nothing
    5. Attach the company draft and advance to PENDING_STEP3

    Steps 2-5 run atomically inside the draft store; a failure at any of
    them leaves the draft untouched.
    """

    def __init__(self, draft_store: ISignupDraftStore):
        self.draft_store = draft_store

    async def execute(self, command: CaptureCompanyCommand) -> Result[CaptureCompanyResponse]:
        resolved = await self.draft_store.get(command.signup_token)
        if resolved.is_err():
            return resolved

        result = await self.draft_store.advance_to_step3(
            command.signup_token,
            command.email,
            command.password,
            command.company_fields,
        )
        if result.is_err():
            logger.info(
                f"Signup draft {command.signup_token[:8]} step 2 rejected: {result.error.code}"
            )
            return result

        company = result.value.company_draft
        logger.info(
            f"Signup draft {command.signup_token[:8]} captured company {company.company_name}"
        )
        return Return.ok(CaptureCompanyResponse())
