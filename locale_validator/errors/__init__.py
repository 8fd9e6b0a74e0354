"""
Error handling for the locale validator.

- Structured error hierarchy
- Errors-as-data collection for a run
- Boundary decorator for unexpected faults
"""

from .exceptions import (
    Annotation,
    LocaleValidatorError,
    ConfigurationError,
    LocaleLoadError,
    ReferenceLoadError,
    InvalidKeysError,
)

from .handlers import ErrorCollector

from .decorators import handle_errors

__all__ = [
    # Exceptions
    "Annotation",
    "LocaleValidatorError",
    "ConfigurationError",
    "LocaleLoadError",
    "ReferenceLoadError",
    "InvalidKeysError",

    # Handlers
    "ErrorCollector",

    # Decorators
    "handle_errors",
]
