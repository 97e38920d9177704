import logging

from libs.result import Error, Result, Return

from src.app.services.credentials import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.draft_store import ISignupDraftStore
from src.domain.validation import ValidationError, validate_email, validate_password
from .dtos import StartSignupCommand, StartSignupResponse

logger = logging.getLogger(__name__)


class StartSignupUseCase:
    """
    Signup Step 1 - credential creation

    Business Logic:
    1. Validate email shape and normalize to lowercase
    2. Validate password length and confirmation
    3. Reject emails that already belong to a portal user
    4. Hash password with bcrypt
    5. Begin a draft in PENDING_STEP2 and return its token

    The uniqueness check here is advisory; step 3 re-checks it inside the
    commit transaction.
    """

    def __init__(self, uow: UnitOfWork, draft_store: ISignupDraftStore):
        self.uow = uow
        self.draft_store = draft_store

    async def execute(self, command: StartSignupCommand) -> Result[StartSignupResponse]:
        try:
            email = validate_email(command.email)
            password = validate_password(command.password, command.password_confirm)
        except ValidationError as exc:
            return Return.err(Error("VALIDATION_ERROR", exc.reason))

        # Opportunistic sweep of abandoned signups
        await self.draft_store.purge_expired()

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
        if existing_user:
            return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already registered"))

        result = await self.draft_store.begin(email, hash_password(password))
        if result.is_err():
            return result

        draft = result.value
        logger.info(f"Signup draft {draft.token[:8]} started for {email}")

        return Return.ok(StartSignupResponse(signup_token=draft.token))
