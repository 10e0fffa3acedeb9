"""Decode and encode entry point shared by every schema."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.config import Settings
from ..domain.errors import TypeMismatch, UpstreamError, details_from, raise_for
from ..schemas.base import WireModel
from ..schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def root_name(schema: Any) -> str:
    """First segment of error paths for values decoded with ``schema``."""
    if isinstance(schema, type) and issubclass(schema, WireModel):
        return schema.wire_name()
    return "value"


class WireCodec:
    """Turns raw API JSON into validated schema values and back."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def decode(self, schema: Any, raw: Any, root: Optional[str] = None) -> Any:
        """
        Decode one API object.

        Args:
            schema: Schema class (or any type pydantic can validate) expected for ``raw``
            raw: JSON value already parsed into Python objects
            root: First segment of error paths, defaults to the schema's wire name

        Returns:
            The validated, immutable value

        Raises:
            UpstreamError: If ``raw`` is an API error body
            DecodeError: If ``raw`` does not match ``schema``; the subclass names the kind of failure
        """
        root = root or root_name(schema)
        if not isinstance(raw, Mapping):
            raise TypeMismatch(root, f"expected a JSON object, got {type(raw).__name__}")
        if schema is not ErrorResponse and "error" in raw and "object" not in raw:
            response = self._validate(ErrorResponse, raw, ErrorResponse.wire_name())
            raise UpstreamError(root, response.error)

        value = self._validate(schema, raw, root)
        logger.debug("Decoded %s", root)
        return value

    def encode(self, value: BaseModel, collapse_references: Optional[bool] = None) -> Dict[str, Any]:
        """
        Produce the wire JSON for ``value``.

        Expandable references are written as identifiers unless
        ``collapse_references`` is false. The output is validated against the
        value's own schema before it is returned, so values built with
        ``model_construct`` cannot bypass the scalar predicates.
        """
        if collapse_references is None:
            collapse_references = self._settings.collapse_references
        data = value.model_dump(
            mode="json",
            by_alias=True,
            context={"collapse_references": collapse_references},
            warnings=False,
        )
        schema = type(value)
        self._validate(schema, data, root_name(schema))
        logger.debug("Encoded %s", root_name(schema))
        return data

    def _validate(self, schema: Any, raw: Any, root: str) -> Any:
        context = self._settings.validation_context()
        try:
            if isinstance(schema, type) and issubclass(schema, BaseModel):
                return schema.model_validate(raw, context=context)
            return TypeAdapter(schema).validate_python(raw, context=context)
        except PydanticValidationError as exc:
            raise_for(details_from(exc, root))
