"""Raw, untrusted input describing a business (scraped page data or free text)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class RawSignal(BaseModel):
    """Partial signal about a business. Every field may be missing.

    Only the synthesizer reads this; nothing downstream trusts it directly.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    description: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    images: list[str] = []
    social_links: dict[str, str] = {}
    headings: list[str] = []
    free_text: str = ""

    @field_validator(
        "title", "description", "contact_email", "contact_phone", "free_text",
        mode="before",
    )
    @classmethod
    def coerce_none_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("images", "headings", mode="before")
    @classmethod
    def drop_empty_items(cls, v: object) -> object:
        # Scraped lists sometimes arrive as null or with blank entries.
        if v is None:
            return []
        if isinstance(v, list):
            return [item for item in v if item]
        return v

    @field_validator("social_links", mode="before")
    @classmethod
    def coerce_none_to_dict(cls, v: object) -> object:
        return {} if v is None else v
