"""
Expandable references.

Some relational fields arrive either as a bare identifier or, when the
request asked for the relation to be expanded, as the embedded object.
``Expandable[T]`` accepts both and picks the branch from the payload shape
alone: objects are decoded as ``T``, strings are kept as the identifier.
"""

from typing import Annotated, Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    Discriminator,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictStr,
    Tag,
    WrapSerializer,
)

from ..domain.errors import REFERENCE_TAG_PREFIX

EMBEDDED = REFERENCE_TAG_PREFIX + "object"
IDENTIFIER = REFERENCE_TAG_PREFIX + "id"


def _reference_kind(value: Any) -> Optional[str]:
    if isinstance(value, (Mapping, BaseModel)):
        return EMBEDDED
    if isinstance(value, str):
        return IDENTIFIER
    return None


def _serialize_reference(value: Any, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
    context = info.context or {}
    if isinstance(value, BaseModel) and context.get("collapse_references"):
        return value.id
    return handler(value)


class Expandable:
    """``Expandable[T]`` is the union of an identifier string and an embedded ``T``."""

    def __class_getitem__(cls, model: Any) -> Any:
        return Annotated[
            Union[Annotated[model, Tag(EMBEDDED)], Annotated[StrictStr, Tag(IDENTIFIER)]],
            Discriminator(
                _reference_kind,
                custom_error_type="reference_type",
                custom_error_message="expected an identifier string or an embedded object",
            ),
            WrapSerializer(_serialize_reference),
        ]


def reference_id(ref: Any) -> Optional[str]:
    """Return the identifier of ``ref`` whichever representation it uses."""
    if ref is None or isinstance(ref, str):
        return ref
    return ref.id


def is_expanded(ref: Any) -> bool:
    return isinstance(ref, BaseModel)
