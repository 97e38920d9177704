"""
Field Validation

Stateless checks used by the signup workflow. Each function returns the
normalized value or raises ValidationError naming the offending field.

Normalization policy: company, contact and address fields are stored
uppercase; email and website stay lowercase. It is applied once, when
fields are accepted into a draft.
"""

import re
import secrets
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

import email_validator

from src.domain.entities import BillingInfo, CompanyDraft, PostalAddress

EU_COUNTRY_CODES = frozenset(
    {
        "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE", "FI", "FR", "DE", "GR", "HU", "IE",
        "IT", "LV", "LT", "LU", "MT", "NL", "PL", "PT", "RO", "SK", "SI", "ES", "SE",
    }
)

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt input limit

_NON_DIGITS = re.compile(r"[^\d]")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


class ValidationError(ValueError):
    """A single field failed validation"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(reason)


def safe_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_upper(value: Any) -> str:
    return safe_text(value).upper()


def normalize_lower(value: Any) -> str:
    return safe_text(value).lower()


def validate_email(value: Any, field: str = "email") -> str:
    """Require local@domain.tld and return the lowercase lookup key"""
    email = normalize_lower(value)
    if not email:
        raise ValidationError(field, "Invalid email.")
    try:
        email_validator.validate_email(email, check_deliverability=False)
    except email_validator.EmailNotValidError:
        raise ValidationError(field, "Invalid email.")
    return email


def validate_password(password: Any, confirm: Any) -> str:
    password = "" if password is None else str(password)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            "password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError("password", "Password is too long.")
    if confirm is None or str(confirm) != password:
        raise ValidationError("password_confirm", "Passwords do not match.")
    return password


def validate_country_code(value: Any, field: str = "country_code") -> str:
    code = normalize_upper(value)
    if code not in EU_COUNTRY_CODES:
        raise ValidationError(field, "Invalid country code.")
    return code


def normalize_website(value: Any, field: str = "website") -> str:
    """Optional website; adds https:// when no scheme is given"""
    website = safe_text(value)
    if not website:
        return ""

    if not website.lower().startswith(("http://", "https://")):
        website = f"https://{website}"

    try:
        parsed = urlparse(website)
        hostname = parsed.hostname
    except ValueError:
        raise ValidationError(field, "Invalid website.")

    if parsed.scheme not in ("http", "https") or not hostname or " " in website:
        raise ValidationError(field, "Invalid website.")

    return website.lower()


def parse_int_in_range(value: Any, low: int, high: int, default: int = 0) -> int:
    """
    Extract the digits of value and clamp the result to [low, high].

    A leading minus sign is honoured so negative input clamps to low;
    input without any digit falls back to default. Digit runs too long
    for the bounds are truncated before conversion.
    """
    text = safe_text(value)
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return max(low, min(high, default))

    # Keep one digit more than the widest bound; the clamp result is the same
    max_width = len(str(max(abs(low), abs(high)))) + 1
    number = int(digits.lstrip("0")[:max_width] or "0")
    if text.startswith("-"):
        number = -number

    return max(low, min(high, number))


def build_address_line(
    street: Any, box: Any, postal_code: Any, city: Any, country_code: Any
) -> str:
    """Flattened display line, e.g. 'MAIN ST, 1000 BRUSSELS, BE'"""
    locality = " ".join(p for p in (safe_text(postal_code), safe_text(city)) if p)
    parts = [safe_text(street), safe_text(box), locality, safe_text(country_code)]
    return ", ".join(p for p in parts if p)


def make_company_code(company_name: Any) -> str:
    base = _NON_ALNUM.sub("", safe_text(company_name)).upper()[:8]
    suffix = 1000 + secrets.randbelow(9000)
    return f"{base or 'COMP'}-{suffix}"


def require_text(fields: Mapping[str, Any], key: str, label: str) -> str:
    value = normalize_upper(fields.get(key))
    if not value:
        raise ValidationError(key, f"{label} is required.")
    return value


def _build_address(fields: Mapping[str, Any], prefix: str, label: str) -> PostalAddress:
    return PostalAddress(
        street=require_text(fields, f"{prefix}_street", f"{label} street"),
        box=normalize_upper(fields.get(f"{prefix}_box")),
        postal_code=require_text(fields, f"{prefix}_postal_code", f"{label} postal code"),
        city=require_text(fields, f"{prefix}_city", f"{label} city"),
        country_code=validate_country_code(
            fields.get(f"{prefix}_country_code"), field=f"{prefix}_country_code"
        ),
    )


def build_company_draft(fields: Mapping[str, Any]) -> CompanyDraft:
    """
    Validate and normalize the step 2 company profile.

    When delivery_is_different is set, every delivery address field is
    required and validated together; otherwise the delivery address is left
    unset and mirrors the registered one.
    """
    company_name = require_text(fields, "company_name", "Company name")
    enterprise_number = require_text(fields, "enterprise_number", "Enterprise number")
    first_name = require_text(fields, "contact_first_name", "Contact first name")
    last_name = require_text(fields, "contact_last_name", "Contact last name")

    registered = _build_address(fields, "registered", "Registered")
    billing_email = validate_email(fields.get("billing_email"), field="billing_email")
    website = normalize_website(fields.get("website"))

    contact_person = normalize_upper(fields.get("registered_contact_person")) or (
        f"{first_name} {last_name}"
    )

    delivery: Optional[PostalAddress] = None
    delivery_contact = ""
    if fields.get("delivery_is_different") is True:
        delivery = _build_address(fields, "delivery", "Delivery")
        delivery_contact = normalize_upper(fields.get("delivery_contact_person"))

    return CompanyDraft(
        company_name=company_name,
        enterprise_number=enterprise_number,
        website=website,
        employees_count=parse_int_in_range(fields.get("employees_count"), 0, 100000),
        contact_first_name=first_name,
        contact_last_name=last_name,
        contact_phone=safe_text(fields.get("contact_phone")),
        contact_person=contact_person,
        registered_address=registered,
        billing_info=BillingInfo(
            email=billing_email,
            reference=normalize_upper(fields.get("billing_reference")),
        ),
        delivery_address=delivery,
        delivery_contact_person=delivery_contact,
    )
