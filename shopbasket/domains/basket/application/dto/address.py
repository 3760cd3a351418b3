"""Address input DTO.

Validates address values entered by customers before they become part of
the basket.
"""

import re

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from shopbasket.domains.basket.domain.entities import OrderAddress

COUNTRY_PATTERN = re.compile(r"^[A-Z]{2}$")
LANGUAGE_PATTERN = re.compile(r"^[a-z]{2}(_[A-Z]{2})?$")


class AddressInput(BaseModel):
    """Address form values"""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    salutation: str = Field("", max_length=8)
    company: str = Field("", max_length=100)
    vat_id: str = Field("", max_length=32)
    title: str = Field("", max_length=64)
    firstname: str = Field("", max_length=64)
    lastname: str = Field("", max_length=64)
    address1: str = Field("", max_length=200)
    address2: str = Field("", max_length=200)
    address3: str = Field("", max_length=200)
    postal: str = Field("", max_length=16)
    city: str = Field("", max_length=200)
    state: str = Field("", max_length=200)
    country_id: str | None = Field(None, description="ISO 3166-1 alpha-2 code")
    language_id: str | None = Field(None, description="ISO 639-1 code, optionally with region")
    telephone: str = Field("", max_length=32)
    email: EmailStr | None = None
    website: str = Field("", max_length=255)
    customer_address_id: str | None = None
    nostore: bool = False

    @field_validator("email", "country_id", "language_id", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("country_id")
    @classmethod
    def validate_country(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.upper()
        if not COUNTRY_PATTERN.match(v):
            raise PydanticCustomError("country_invalid", "Country code must consist of two letters", {})
        return v

    @field_validator("language_id")
    @classmethod
    def validate_language(cls, v: str | None) -> str | None:
        if v is not None and not LANGUAGE_PATTERN.match(v):
            raise PydanticCustomError("language_invalid", "Language code is not valid", {})
        return v

    def to_address(self) -> OrderAddress:
        values = self.model_dump()
        values["email"] = values["email"] or ""
        return OrderAddress(**values)
