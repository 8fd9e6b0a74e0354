"""Validation of a whole locale directory against its reference locale."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import structlog

from locale_validator.config import Settings
from locale_validator.errors import ErrorCollector, LocaleValidatorError
from locale_validator.reporting import Reporter

from .discovery import discover_locale_files
from .loader import load_locale_file, load_reference_locale, resolve_locale_path
from .models import ReferenceKeySet
from .positions import PositionIndex, PositionIndexError, build_position_index
from .validator import validate_locale

logger = structlog.get_logger(__name__)

MAIN_LOCALE_FAILED = "Unable to load and validate the main locale."
LOCALES_FAILED = "Could not validate all locale files, see log for more information."
ALL_VALID = "All locale files were validated successfully"


@dataclass
class RunResult:
    """Aggregate result of one validation run."""

    success: bool
    fatal_error: Optional[LocaleValidatorError] = None
    errors: List[LocaleValidatorError] = field(default_factory=list)
    checked_files: List[Path] = field(default_factory=list)


def _index_positions(source: str, path: Path) -> Optional[PositionIndex]:
    """Key positions for annotations, or None when the text cannot be indexed."""
    try:
        return build_position_index(source)
    except PositionIndexError as e:
        logger.warning("Could not index key positions", path=str(path), error=str(e))
        return None


def run_validation(settings: Settings, reporter: Reporter) -> RunResult:
    """Validate every candidate locale in the workspace.

    The reference locale is loaded first; if that fails nothing else is
    checked. Otherwise each candidate is loaded and validated in turn, and
    all failures are reported together at the end.

    Args:
        settings: Resolved settings; the workspace comes from here only
        reporter: Output channel

    Returns:
        RunResult describing the run
    """
    workspace = settings.workspace_dir
    reporter.debug(f"Parsing locale files in {workspace}")

    main_result = load_reference_locale(resolve_locale_path(settings.main_language, workspace))
    if not main_result.success:
        reporter.report_error(main_result.error)
        reporter.set_failed(MAIN_LOCALE_FAILED)
        logger.error("Reference locale could not be loaded", path=str(main_result.path))
        return RunResult(success=False, fatal_error=main_result.error)

    reference_keys = ReferenceKeySet.from_document(main_result.document)
    logger.info("Reference locale loaded", locale=reference_keys.locale_code, keys=len(reference_keys))

    collector = ErrorCollector()
    checked_files: List[Path] = []

    for path in discover_locale_files(workspace, settings.locale_pattern, exclude=settings.reference_name):
        reporter.debug(f"Validating {path}")
        checked_files.append(path)

        result = load_locale_file(path)
        if not result.success:
            collector.record_error(result.error)
            continue

        positions = _index_positions(result.source, path) if settings.use_annotations else None
        outcome = validate_locale(result.document, reference_keys, path=path, positions=positions)
        if not outcome.success:
            collector.record_error(outcome.error)

    logger.info("Locale validation finished", checked=len(checked_files), **collector.get_error_stats())

    if not collector.has_errors:
        reporter.debug(ALL_VALID)
        return RunResult(success=True, checked_files=checked_files)

    for error in collector:
        reporter.report_error(error)
    reporter.set_failed(LOCALES_FAILED)
    return RunResult(success=False, errors=list(collector), checked_files=checked_files)
