from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Card(BaseModel):
    id: int = Field(ge=0)
    title: str
    description: str
    created_at: str
    updated_at: str
    preview_url: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("preview_url")
    @classmethod
    def blank_preview_is_missing(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class CardMeta(BaseModel):
    meta: Card
