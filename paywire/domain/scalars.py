"""
Validated scalar types shared by the wire schemas.

Each type is an ``Annotated`` alias so the same predicate runs whether the
value arrives in an API response or is being built for a request body.
"""

from typing import Annotated, Any, Dict

from pydantic import Field, StrictInt, StrictStr, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import details_from, raise_for

MAX_METADATA_KEYS = 10
MAX_METADATA_KEY_LENGTH = 40
MAX_METADATA_VALUE_LENGTH = 500

PosInt = Annotated[StrictInt, Field(gt=0)]
NonnegInt = Annotated[StrictInt, Field(ge=0)]

MetadataKey = Annotated[StrictStr, StringConstraints(max_length=MAX_METADATA_KEY_LENGTH)]
MetadataValue = Annotated[StrictStr, StringConstraints(max_length=MAX_METADATA_VALUE_LENGTH)]
Metadata = Annotated[Dict[MetadataKey, MetadataValue], Field(max_length=MAX_METADATA_KEYS)]

_POS_INT = TypeAdapter(PosInt)
_NONNEG_INT = TypeAdapter(NonnegInt)
_METADATA = TypeAdapter(Metadata)


def _validate(adapter: TypeAdapter, raw: Any, root: str) -> Any:
    try:
        return adapter.validate_python(raw)
    except PydanticValidationError as exc:
        raise_for(details_from(exc, root))


def decode_pos_int(raw: Any, root: str = "value") -> int:
    """Return ``raw`` if it is an integer greater than zero."""
    return _validate(_POS_INT, raw, root)


def decode_nonneg_int(raw: Any, root: str = "value") -> int:
    """Return ``raw`` if it is an integer greater than or equal to zero."""
    return _validate(_NONNEG_INT, raw, root)


def decode_metadata(raw: Any, root: str = "metadata") -> Dict[str, str]:
    """
    Validate a flat metadata mapping.

    Args:
        raw: Decoded JSON object
        root: Name used as the first segment of error paths

    Returns:
        A new dict with the same pairs in the same order

    Raises:
        TypeMismatch: If ``raw`` is not an object of strings
        ValidationFailed: If a pair count, key length or value length limit is exceeded
    """
    return _validate(_METADATA, raw, root)


# outgoing values go through the same predicates as incoming ones
encode_pos_int = decode_pos_int
encode_nonneg_int = decode_nonneg_int
encode_metadata = decode_metadata
