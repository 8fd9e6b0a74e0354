"""
Error hierarchy for the locale validator.

Per-file failures are created as instances of these classes and returned as
data by the loader and the validator; only configuration problems and
unexpected faults are actually raised.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union


@dataclass(frozen=True)
class Annotation:
    """A message that can be attached to a file position by the reporter."""

    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    title: Optional[str] = None


class LocaleValidatorError(Exception):
    """
    Base exception for all locale validator errors.

    Carries the offending file (when there is one) and enough context to be
    logged as a structured event or rendered as an annotation.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        file: Optional[Union[str, Path]] = None,
        previous_error: Optional[BaseException] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.file = str(file) if file is not None else None
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "file": self.file,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }

    def annotations(self) -> List[Annotation]:
        """Annotations to report for this error."""
        return [Annotation(message=self.message, file=self.file)]

    def is_fatal(self) -> bool:
        """Whether this error ends the run."""
        return False


class ConfigurationError(LocaleValidatorError):
    """Invalid settings or environment."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)

    def is_fatal(self) -> bool:
        return True


class LocaleLoadError(LocaleValidatorError):
    """A locale file is missing, unreadable or not a locale document."""

    def __init__(self, message: str, file: Optional[Union[str, Path]] = None, reason: Optional[str] = None, **kwargs):
        super().__init__(message, file=file, context={"reason": reason}, **kwargs)
        self.reason = reason


class ReferenceLoadError(LocaleLoadError):
    """The reference locale could not be loaded; nothing else can be checked."""

    def is_fatal(self) -> bool:
        return True


class InvalidKeysError(LocaleValidatorError):
    """A locale file defines keys that the reference locale does not have."""

    def __init__(
        self,
        message: str,
        locale_code: str,
        invalid_keys: Sequence[Any],
        file: Optional[Union[str, Path]] = None,
        **kwargs
    ):
        self.locale_code = locale_code
        self.invalid_keys = tuple(invalid_keys)

        super().__init__(
            message,
            file=file,
            context={
                "locale_code": locale_code,
                "invalid_keys": [item.key for item in self.invalid_keys],
            },
            **kwargs
        )

    def annotations(self) -> List[Annotation]:
        """One annotation per key when positions are known, otherwise a single summary."""
        positioned = [item for item in self.invalid_keys if item.position is not None]
        if not positioned:
            return super().annotations()

        return [
            Annotation(
                message=f"Locale: {self.locale_code} has invalid key: {item.key}",
                file=self.file,
                line=item.position.line if item.position else None,
                column=item.position.column if item.position else None,
                title="Invalid locale key",
            )
            for item in self.invalid_keys
        ]
