"""Data types for locale documents and validation results."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from locale_validator.errors import InvalidKeysError, LocaleLoadError


class LocaleDocument(BaseModel):
    """One parsed locale file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    locale_code: str = Field(alias="localeCode")
    messages: Dict[str, str]

    @classmethod
    def from_json_data(cls, data: Any, default_code: str) -> "LocaleDocument":
        """Validate decoded JSON, using ``default_code`` when localeCode is absent."""
        if isinstance(data, dict) and "localeCode" not in data:
            data = {**data, "localeCode": default_code}
        return cls.model_validate(data)

    def keys(self) -> Tuple[str, ...]:
        """Message keys in file order."""
        return tuple(self.messages)


@dataclass(frozen=True)
class ReferenceKeySet:
    """Keys defined by the reference locale."""

    locale_code: str
    keys: FrozenSet[str]

    @classmethod
    def from_document(cls, document: LocaleDocument) -> "ReferenceKeySet":
        return cls(locale_code=document.locale_code, keys=frozenset(document.messages))

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)


@dataclass(frozen=True)
class SourcePosition:
    """1-based line and column in the raw file text."""

    line: int
    column: int


@dataclass(frozen=True)
class InvalidKey:
    """A message key missing from the reference locale."""

    key: str
    position: Optional[SourcePosition] = None


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one locale file."""

    success: bool
    path: Path
    document: Optional[LocaleDocument] = None
    source: Optional[str] = None
    error: Optional[LocaleLoadError] = None


@dataclass(frozen=True)
class ValidationOutcome:
    """Outcome of checking one document against the reference keys."""

    success: bool
    locale_code: str
    path: Optional[Path] = None
    invalid_keys: Tuple[InvalidKey, ...] = ()
    error: Optional[InvalidKeysError] = None

    @property
    def invalid_key_names(self) -> Tuple[str, ...]:
        return tuple(item.key for item in self.invalid_keys)
