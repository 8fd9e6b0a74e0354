"""Checking a locale document against the reference keys."""

from pathlib import Path
from typing import Optional

import structlog

from locale_validator.errors import InvalidKeysError

from .models import InvalidKey, LocaleDocument, ReferenceKeySet, ValidationOutcome
from .positions import PositionIndex

logger = structlog.get_logger(__name__)


def validate_locale(
    document: LocaleDocument,
    reference_keys: ReferenceKeySet,
    path: Optional[Path] = None,
    positions: Optional[PositionIndex] = None,
) -> ValidationOutcome:
    """Report every message key that the reference locale does not define.

    All invalid keys are collected, in the order the document lists them.
    Keys the document lacks are not an error.

    Args:
        document: Parsed candidate locale
        reference_keys: Keys of the reference locale
        path: File the document came from, used for annotations
        positions: Optional index from ``build_position_index``

    Returns:
        ValidationOutcome; on failure ``error`` holds an InvalidKeysError
    """
    invalid_keys = tuple(
        InvalidKey(key=key, position=positions.get(("messages", key)) if positions else None)
        for key in document.keys()
        if key not in reference_keys
    )

    if not invalid_keys:
        return ValidationOutcome(success=True, locale_code=document.locale_code, path=path)

    logger.debug("Invalid keys found", locale=document.locale_code, count=len(invalid_keys))
    error = InvalidKeysError(
        f"Locale: {document.locale_code} has invalid keys: {','.join(item.key for item in invalid_keys)}",
        locale_code=document.locale_code,
        invalid_keys=invalid_keys,
        file=path,
    )
    return ValidationOutcome(
        success=False,
        locale_code=document.locale_code,
        path=path,
        invalid_keys=invalid_keys,
        error=error,
    )
