"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer registration requests.

    Validates:
    - ``name`` is a non-empty string (surrounding whitespace stripped).
    - ``email`` is a well-formed address (Pydantic ``EmailStr``), lowercased.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()
