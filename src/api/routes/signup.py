from typing import Optional, Union

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from config import ApplicationConfig
from src.api.error import SIGNUP_ERROR_STATUS, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.stores.draft_store import ISignupDraftStore
from src.app.use_cases.signup import (
    CaptureCompanyCommand,
    CaptureCompanyResponse,
    CaptureCompanyUseCase,
    ConfirmOrderCommand,
    ConfirmOrderResponse,
    ConfirmOrderUseCase,
    OrderPricing,
    StartSignupCommand,
    StartSignupResponse,
    StartSignupUseCase,
)
from src.depends import get_draft_store, get_unit_of_work

router = APIRouter(prefix="/signup", tags=["Signup"])

def signup_token_field():
    # The portal frontend historically sent camelCase signupToken
    return Field(
        ...,
        validation_alias=AliasChoices("signup_token", "signupToken"),
        description="Token returned by step 1",
    )


class SignupRequest(BaseModel):
    """
    Base for signup HTTP payloads

    Field presence and types are checked here; field content (email shape,
    country codes, required company fields) is checked by the use cases so
    the client gets a field-specific message.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)


class SignupStep1Request(SignupRequest):
    email: str = Field(..., description="Login email address")
    password: str = Field(..., description="Password (min 8 chars)")
    password_confirm: str = Field(..., description="Must equal password")


class SignupStep2Request(SignupRequest):
    signup_token: str = signup_token_field()
    email: str
    password: str

    company_name: Optional[str] = None
    enterprise_number: Optional[str] = None
    website: Optional[str] = None
    employees_count: Optional[str] = None

    contact_first_name: Optional[str] = None
    contact_last_name: Optional[str] = None
    contact_phone: Optional[str] = None
    registered_contact_person: Optional[str] = None

    registered_street: Optional[str] = None
    registered_box: Optional[str] = None
    registered_postal_code: Optional[str] = None
    registered_city: Optional[str] = None
    registered_country_code: Optional[str] = None

    billing_email: Optional[str] = None
    billing_reference: Optional[str] = None

    delivery_is_different: bool = False
    delivery_contact_person: Optional[str] = None
    delivery_street: Optional[str] = None
    delivery_box: Optional[str] = None
    delivery_postal_code: Optional[str] = None
    delivery_city: Optional[str] = None
    delivery_country_code: Optional[str] = None


class SignupStep3Request(SignupRequest):
    signup_token: str = signup_token_field()
    email: str
    password: str
    extra_plates: Optional[Union[int, float, str]] = None
    sales_terms: bool = False


@router.post("/step1", status_code=status.HTTP_200_OK, response_model=StartSignupResponse)
async def signup_step1(
    request: SignupStep1Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    draft_store: ISignupDraftStore = Depends(get_draft_store),
):
    """
    Signup Step 1 - create credentials

    Returns the signup token used to resume steps 2 and 3.

    Raises:
        - 400 Bad Request: invalid email/password, or email already registered
    """
    command = StartSignupCommand(
        email=request.email,
        password=request.password,
        password_confirm=request.password_confirm,
    )

    result = await StartSignupUseCase(uow, draft_store).execute(command)
    if result.is_err():
        raise_for_error(result.error, SIGNUP_ERROR_STATUS)

    return result.value


@router.post("/step2", status_code=status.HTTP_200_OK, response_model=CaptureCompanyResponse)
async def signup_step2(
    request: SignupStep2Request,
    draft_store: ISignupDraftStore = Depends(get_draft_store),
):
    """
    Signup Step 2 - company profile

    Requires the same email and password as step 1.

    Raises:
        - 400 Bad Request: expired token, credential mismatch, out-of-sequence
          call, or a missing/invalid company field
    """
    command = CaptureCompanyCommand(
        signup_token=request.signup_token,
        email=request.email,
        password=request.password,
        company_fields=request.model_dump(exclude={"signup_token", "email", "password"}),
    )

    result = await CaptureCompanyUseCase(draft_store).execute(command)
    if result.is_err():
        raise_for_error(result.error, SIGNUP_ERROR_STATUS)

    return result.value


@router.post("/step3", status_code=status.HTTP_200_OK, response_model=ConfirmOrderResponse)
async def signup_step3(
    request: SignupStep3Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    draft_store: ISignupDraftStore = Depends(get_draft_store),
):
    """
    Signup Step 3 - confirm order and create the account

    Creates the company and its admin user in one transaction and returns
    the computed order summary. Pricing is quoted, not charged.

    Raises:
        - 400 Bad Request: expired or replayed token, credential mismatch,
          terms not accepted, or email registered in the meantime
        - 500 Internal Server Error: persistence failure (draft kept for retry)
    """
    command = ConfirmOrderCommand(
        signup_token=request.signup_token,
        email=request.email,
        password=request.password,
        extra_plates=request.extra_plates,
        sales_terms=request.sales_terms,
    )

    use_case = ConfirmOrderUseCase(uow, draft_store, OrderPricing.from_config(ApplicationConfig))
    result = await use_case.execute(command)
    if result.is_err():
        raise_for_error(result.error, SIGNUP_ERROR_STATUS)

    return result.value
