"""Loading locale files from disk."""

import json
from pathlib import Path
from typing import Type, Union

import pydantic
import structlog

from locale_validator.errors import LocaleLoadError, ReferenceLoadError

from .models import LoadResult, LocaleDocument

logger = structlog.get_logger(__name__)


def resolve_locale_path(file: Union[str, Path], workspace: Path) -> Path:
    """Resolve a bare file name such as ``en.json`` against the workspace.

    Paths that already name a directory are returned unchanged.
    """
    path = Path(file)
    if path.is_absolute() or path.parent != Path("."):
        return path
    return workspace / path


def _describe(error: Exception) -> str:
    if isinstance(error, pydantic.ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in item['loc']) or 'document'}: {item['msg']}"
            for item in error.errors()
        )
    if isinstance(error, OSError):
        return error.strerror or str(error)
    return str(error)


def load_locale_file(
    path: Union[str, Path],
    error_class: Type[LocaleLoadError] = LocaleLoadError,
) -> LoadResult:
    """Read and parse one locale file.

    Failures are returned in the result instead of being raised.

    Args:
        path: Locale file to read
        error_class: Error type to report failures with

    Returns:
        LoadResult holding the document and its raw text, or the error
    """
    path = Path(path)
    logger.debug("Reading locale file", path=str(path))

    try:
        source = path.read_text(encoding="utf-8")
        document = LocaleDocument.from_json_data(json.loads(source), default_code=path.stem)
    except (OSError, ValueError, pydantic.ValidationError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        reason = _describe(e)
        logger.debug("Failed to load locale file", path=str(path), reason=reason)
        error = error_class(
            f"Could not validate the {path.name} language file. Reason: {reason}",
            file=path,
            reason=reason,
            previous_error=e,
        )
        return LoadResult(success=False, path=path, error=error)

    logger.debug("Loaded locale file", path=str(path), locale=document.locale_code, keys=len(document.messages))
    return LoadResult(success=True, path=path, document=document, source=source)


def load_reference_locale(path: Union[str, Path]) -> LoadResult:
    """Load the reference locale; a failure here is fatal for the run."""
    return load_locale_file(path, error_class=ReferenceLoadError)
