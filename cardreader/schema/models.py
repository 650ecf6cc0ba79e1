"""Candidate and contact record models for business card extraction."""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from cardreader.rules import EMAIL_PATTERN, is_safe_text, is_valid_phone

CONTACT_FIELDS = ('name', 'email', 'phone', 'company')


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CandidateRecord(BaseModel):
    """
    Untrusted field candidates produced by one extraction pass.

    Every value is either None or a substring of the OCR text. Nothing in
    here has been sanitized; it must go through the sanitizer before it can
    be stored or displayed.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    def is_empty(self) -> bool:
        return all(getattr(self, field) is None for field in CONTACT_FIELDS)


class ContactRecord(BaseModel):
    """
    Trusted contact record extracted from a business card.

    All four contact fields support None when the card did not yield a
    usable value. Present values are re-checked on construction, so a
    record can never hold a value that skipped sanitization:
    text fields are non-blank, at most 100 characters and free of
    < > " ' &; phone numbers pass the strict phone validity check.

    id and created_at are assigned by the card repository.
    """

    id: Optional[int] = Field(
        default=None,
        description="Identity assigned by storage (None until persisted)"
    )

    name: Optional[str] = Field(
        default=None,
        description="Person's name"
    )

    email: Optional[str] = Field(
        default=None,
        description="Email address"
    )

    phone: Optional[str] = Field(
        default=None,
        description="Phone number, digits with optional leading '+'"
    )

    company: Optional[str] = Field(
        default=None,
        description="Company name line"
    )

    created_at: datetime = Field(
        default_factory=_utcnow,
        description="Creation timestamp (UTC)"
    )

    @field_validator('name', 'email', 'company')
    @classmethod
    def check_text_field(cls, v: Optional[str]) -> Optional[str]:
        """Refuse text values that were not sanitized."""
        if v is None:
            return None
        if not is_safe_text(v):
            raise ValueError("value is not sanitized")
        return v

    @field_validator('email')
    @classmethod
    def check_email(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not EMAIL_PATTERN.search(v):
            raise ValueError("value is not an email address")
        return v

    @field_validator('phone')
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_phone(v):
            raise ValueError("value is not a valid phone number")
        return v

    @field_validator('created_at')
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def with_identity(self, card_id: int, created_at: Optional[datetime] = None) -> "ContactRecord":
        """Return a copy carrying the identity assigned by storage."""
        return ContactRecord(
            id=card_id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            company=self.company,
            created_at=created_at or self.created_at,
        )

    def is_empty(self) -> bool:
        return all(getattr(self, field) is None for field in CONTACT_FIELDS)

    def contact_fields(self) -> dict:
        """The four contact fields only."""
        return {field: getattr(self, field) for field in CONTACT_FIELDS}

    def to_dict(self) -> dict:
        """Convert record to dictionary."""
        return self.model_dump()

    def to_json_dict(self) -> dict:
        """Convert record to JSON-serializable dictionary."""
        result = self.model_dump()
        result['created_at'] = self.created_at.isoformat()
        return result

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }
