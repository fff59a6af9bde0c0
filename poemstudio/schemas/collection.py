import datetime as dt
from typing import Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from poemstudio.schemas.base import ApiModel, PatchModel, reject_null, require_any_field

UPDATABLE_FIELDS = ("name", "description", "icon", "is_default")


class CollectionCreate(ApiModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool = False


class CollectionUpdate(PatchModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: Optional[bool] = None

    @field_validator("name", "is_default")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

    @model_validator(mode="after")
    def has_changes(self):
        return require_any_field(self, UPDATABLE_FIELDS)


class CollectionRead(ApiModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool
    created_at: dt.datetime
    updated_at: dt.datetime
