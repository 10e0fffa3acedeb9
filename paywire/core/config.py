import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings:
    """Codec configuration sourced from environment variables."""

    def __init__(
        self,
        strict_exclusivity: Optional[bool] = None,
        collapse_references: Optional[bool] = None,
    ) -> None:
        load_dotenv()
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if strict_exclusivity is None:
            strict_exclusivity = self._get_bool("PAYWIRE_STRICT_EXCLUSIVITY", default=False)
        if collapse_references is None:
            collapse_references = self._get_bool("PAYWIRE_COLLAPSE_REFERENCES", default=True)
        self.strict_exclusivity = strict_exclusivity
        self.collapse_references = collapse_references

    def validation_context(self) -> Dict[str, Any]:
        """Context handed to pydantic validators on every decode."""
        return {"strict_exclusivity": self.strict_exclusivity}

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise RuntimeError(f"Environment variable {key} must be a boolean")

    def __repr__(self) -> str:
        return (
            f"<Settings strict_exclusivity={self.strict_exclusivity} "
            f"collapse_references={self.collapse_references}>"
        )
