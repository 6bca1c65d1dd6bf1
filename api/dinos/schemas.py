"""
Pydantic schemas for the dinos resource.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

# `weight` is an int4 column.
MAX_WEIGHT = 2_147_483_647


def _reject_nul(value: str | None) -> str | None:
    # PostgreSQL text cannot store NUL bytes.
    if value is not None and "\x00" in value:
        raise ValueError("must not contain NUL characters")
    return value


class DinoCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    # Generated server-side when omitted.
    id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=200)
    # Lax mode: numeric strings like "900" are coerced, "heavy" is rejected.
    weight: int = Field(..., gt=0, le=MAX_WEIGHT)
    diet: str = Field(..., min_length=1, max_length=200)
    user_id: str | None = Field(default=None, max_length=200)

    @field_validator("name", "diet", "user_id")
    @classmethod
    def no_nul_characters(cls, value: str | None) -> str | None:
        return _reject_nul(value)


class DinoUpdate(BaseModel):
    """
    PUT body. Omitted fields keep their stored values; `user_id` may be set
    to null explicitly to clear the owner. The other fields are NOT NULL
    columns, so an explicit null for them is rejected.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    weight: int | None = Field(default=None, gt=0, le=MAX_WEIGHT)
    diet: str | None = Field(default=None, min_length=1, max_length=200)
    user_id: str | None = Field(default=None, max_length=200)

    @field_validator("name", "diet", "user_id")
    @classmethod
    def no_nul_characters(cls, value: str | None) -> str | None:
        return _reject_nul(value)

    @field_validator("name", "weight", "diet")
    @classmethod
    def not_null_when_present(cls, value):
        # Only runs for fields present in the body.
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class Dino(BaseModel):
    id: UUID
    name: str
    weight: int
    diet: str
    user_id: str | None = None


class DeleteResponse(BaseModel):
    ok: bool = True
    id: UUID
