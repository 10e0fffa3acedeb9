"""Decode error taxonomy shared by every entity decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from pydantic import ValidationError as PydanticValidationError

    from ..schemas.error import APIError

MISSING_FIELD = "missing_field"
TYPE_MISMATCH = "type_mismatch"
VALIDATION_FAILED = "validation_failed"
UNKNOWN_ENUM_TAG = "unknown_enum_tag"
UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """One failing location reported by a decode."""

    kind: str
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}" if self.path else self.reason


class DecodeError(ValueError):
    """
    Raised when a raw payload cannot be turned into a validated value.

    Attributes:
        path: Dotted field path of the first failure, e.g. ``customer.sources.data[2].exp_year``
        reason: Human readable explanation of the first failure
        errors: Every failure reported for the payload, first one included
    """

    kind = VALIDATION_FAILED

    def __init__(self, path: str, reason: str, errors: Optional[Sequence[ErrorDetail]] = None) -> None:
        self.path = path
        self.reason = reason
        self.errors: Tuple[ErrorDetail, ...] = tuple(errors) if errors else (ErrorDetail(self.kind, path, reason),)
        super().__init__(f"{path}: {reason}" if path else reason)


class MissingField(DecodeError):
    """A required field is absent."""

    kind = MISSING_FIELD


class TypeMismatch(DecodeError):
    """A field is present but carries the wrong wire type or object shape."""

    kind = TYPE_MISMATCH


class ValidationFailed(DecodeError):
    """A well-typed value violates a scalar or structural predicate."""

    kind = VALIDATION_FAILED


class UnknownEnumTag(DecodeError):
    """A string tag falls outside the closed set of a strict enumeration."""

    kind = UNKNOWN_ENUM_TAG


class UpstreamError(DecodeError):
    """The payload is an API error body instead of the expected object."""

    kind = UPSTREAM_ERROR

    def __init__(self, path: str, error: "APIError") -> None:
        self.error = error
        super().__init__(path, f"{error.type_}: {error.message}")


ERROR_CLASSES = {
    MISSING_FIELD: MissingField,
    TYPE_MISMATCH: TypeMismatch,
    VALIDATION_FAILED: ValidationFailed,
    UNKNOWN_ENUM_TAG: UnknownEnumTag,
}


def raise_for(details: Sequence[ErrorDetail]) -> NoReturn:
    """Raise the exception matching the first detail, carrying all of them."""
    first = details[0]
    raise ERROR_CLASSES[first.kind](first.path, first.reason, details)


REFERENCE_TAG_PREFIX = "reference:"

_TYPE_MISMATCH_TYPES = {
    "object_mismatch",
    "reference_type",
    "union_tag_invalid",
    "union_tag_not_found",
    "int_from_float",
    "is_instance_of",
}


def format_path(root: str, loc: Sequence[object]) -> str:
    """Render a pydantic location as ``root.field.items[2].name``."""
    path = root
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
            continue
        item = str(item)
        if item.startswith(REFERENCE_TAG_PREFIX) or item == "[key]":
            continue
        path = f"{path}.{item}" if path else item
    return path


def classify(error_type: str, loc: Sequence[object], value: object = None) -> str:
    """Map a pydantic error type onto the decode taxonomy."""
    if error_type == "missing":
        return MISSING_FIELD
    if error_type in ("enum", "literal_error"):
        # the object tag is a shape check, not a closed enumeration
        if (loc and loc[-1] == "object") or not isinstance(value, str):
            return TYPE_MISMATCH
        return UNKNOWN_ENUM_TAG
    if error_type in _TYPE_MISMATCH_TYPES or error_type.endswith(("_type", "_parsing")):
        return TYPE_MISMATCH
    return VALIDATION_FAILED


def details_from(exc: "PydanticValidationError", root: str) -> Tuple[ErrorDetail, ...]:
    """Translate every error of a pydantic ``ValidationError``."""
    details = []
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        details.append(ErrorDetail(classify(error["type"], loc, error.get("input")), format_path(root, loc), error["msg"]))
    return tuple(details)
