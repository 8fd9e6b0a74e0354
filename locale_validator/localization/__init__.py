"""Locale loading, discovery and key validation."""

from .discovery import discover_locale_files
from .loader import load_locale_file, load_reference_locale, resolve_locale_path
from .models import (
    InvalidKey,
    LoadResult,
    LocaleDocument,
    ReferenceKeySet,
    SourcePosition,
    ValidationOutcome,
)
from .positions import PositionIndexError, build_position_index
from .runner import RunResult, run_validation
from .validator import validate_locale

__all__ = [
    "InvalidKey",
    "LoadResult",
    "LocaleDocument",
    "PositionIndexError",
    "ReferenceKeySet",
    "RunResult",
    "SourcePosition",
    "ValidationOutcome",
    "build_position_index",
    "discover_locale_files",
    "load_locale_file",
    "load_reference_locale",
    "resolve_locale_path",
    "run_validation",
    "validate_locale",
]
