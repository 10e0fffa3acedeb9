"""Base classes and identifier aliases for the wire schemas."""

import re
from typing import Any, Dict, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError

CustomerId = StrictStr
CardId = StrictStr
ChargeId = StrictStr
InvoiceId = StrictStr
SubscriptionId = StrictStr

# unix seconds, kept exactly as sent
Timestamp = StrictInt

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class WireModel(BaseModel):
    """
    Immutable model decoded from, and encoded to, API JSON.

    Unknown wire fields are ignored. Optional fields that were never sent
    (and never set by the caller) are left out again on encode, so a field
    that arrived as ``null`` stays distinguishable from one that was absent.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @classmethod
    def wire_name(cls) -> str:
        """Name used as the first segment of error paths."""
        field = cls.model_fields.get("object_")
        if field is not None and isinstance(field.default, str):
            return field.default
        origin = cls.__pydantic_generic_metadata__["origin"] or cls
        return _CAMEL_BOUNDARY.sub("_", origin.__name__).lower()

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if field.is_required() or name in self.model_fields_set:
                continue
            if getattr(self, name) is None:
                key = field.alias if info.by_alias and field.alias else name
                data.pop(key, None)
        return data


class StripeObject(WireModel):
    """
    Wire model tagged by an ``object`` field.

    Subclasses declare ``object_: Literal[<tag>] = Field(<tag>, alias="object")``.
    A payload carrying another tag is rejected before any field is looked at.
    """

    @model_validator(mode="before")
    @classmethod
    def _check_object_tag(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "object" in data:
            expected = cls.model_fields["object_"].default
            actual = data["object"]
            if actual != expected:
                raise PydanticCustomError(
                    "object_mismatch",
                    "expected a '{expected}' object, got '{actual}'",
                    {"expected": expected, "actual": str(actual)},
                )
        return data


def is_present(model: BaseModel, field: str) -> bool:
    """Report whether ``field`` was sent on the wire or set explicitly."""
    return field in model.model_fields_set
