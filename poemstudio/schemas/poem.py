import datetime as dt
from typing import Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from poemstudio.schemas.base import ApiModel, PatchModel, reject_null, require_any_field

UPDATABLE_FIELDS = (
    "collection_id",
    "title",
    "form",
    "style",
    "language",
    "prompt",
    "body",
    "notes",
    "is_favorite",
)


class PoemCreate(ApiModel):
    collection_id: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = None
    form: Optional[str] = None
    style: Optional[str] = None
    language: Optional[str] = None
    prompt: Optional[str] = None
    body: str = Field(min_length=1)
    notes: Optional[str] = None
    is_favorite: bool = False


class PoemUpdate(PatchModel):
    # null unfiles the poem
    collection_id: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = None
    form: Optional[str] = None
    style: Optional[str] = None
    language: Optional[str] = None
    prompt: Optional[str] = None
    body: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None
    is_favorite: Optional[bool] = None

    @field_validator("body", "is_favorite")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

    @model_validator(mode="after")
    def has_changes(self):
        return require_any_field(self, UPDATABLE_FIELDS)


class PoemFilter(ApiModel):
    collection_id: Optional[str] = Field(None, min_length=1)
    favorites_only: bool = False


class PoemRead(ApiModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    collection_id: Optional[str] = None
    user_id: str
    title: Optional[str] = None
    form: Optional[str] = None
    style: Optional[str] = None
    language: Optional[str] = None
    prompt: Optional[str] = None
    body: str
    notes: Optional[str] = None
    is_favorite: bool
    created_at: dt.datetime
    updated_at: dt.datetime
