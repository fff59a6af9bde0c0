from typing import Any, Dict, Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in Python.

    Unknown keys (such as a client-supplied ``id`` or ``userId`` on create)
    are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PatchModel(ApiModel):
    """An update body where "omitted" and "set to null" are different things."""

    def patch(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


def require_any_field(model: PatchModel, fields: Iterable[str]) -> PatchModel:
    if not model.model_fields_set.intersection(fields):
        raise ValueError("At least one field must be provided to update.")
    return model


def reject_null(value: Any, field: str) -> Any:
    if value is None:
        raise ValueError(f"{field} cannot be null.")
    return value
