"""Output channels for validation results.

``LogReporter`` writes plain structured log lines. ``GitHubReporter`` writes
GitHub Actions workflow commands, which the runner turns into inline
annotations on the offending file and line.
"""

import sys
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, TextIO

import structlog

from locale_validator.errors import Annotation, LocaleValidatorError

logger = structlog.get_logger(__name__)


class Reporter(ABC):
    """Base reporter; tracks whether the run has been marked failed."""

    def __init__(self):
        self.failed = False
        self.failure_messages: List[str] = []

    @abstractmethod
    def debug(self, message: str) -> None:
        """Emit a debug line."""
        pass

    @abstractmethod
    def annotate(self, annotation: Annotation) -> None:
        """Report one annotation."""
        pass

    def report_error(self, error: LocaleValidatorError) -> None:
        """Report every annotation an error produces."""
        for annotation in error.annotations():
            self.annotate(annotation)

    def set_failed(self, message: str) -> None:
        """Mark the run failed; the process exits non-zero."""
        self.failed = True
        self.failure_messages.append(message)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


class LogReporter(Reporter):
    """Reports through structlog."""

    def debug(self, message: str) -> None:
        logger.debug(message)

    def annotate(self, annotation: Annotation) -> None:
        logger.error(annotation.message, file=annotation.file, line=annotation.line, column=annotation.column)

    def set_failed(self, message: str) -> None:
        super().set_failed(message)
        logger.error(message)


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str, properties: Optional[Dict[str, object]] = None) -> str:
    """Render a workflow command such as ``::error file=a.json,line=3::text``."""
    rendered = ",".join(
        f"{key}={escape_property(str(value))}"
        for key, value in (properties or {}).items()
        if value is not None
    )
    if rendered:
        return f"::{command} {rendered}::{escape_data(message)}"
    return f"::{command}::{escape_data(message)}"


class GitHubReporter(Reporter):
    """Reports as GitHub Actions workflow commands."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self.stream = stream

    def _issue(self, command: str, message: str, properties: Optional[Dict[str, object]] = None) -> None:
        stream = self.stream or sys.stdout
        stream.write(format_command(command, message, properties) + "\n")
        stream.flush()

    def debug(self, message: str) -> None:
        self._issue("debug", message)

    def annotate(self, annotation: Annotation) -> None:
        self._issue(
            "error",
            annotation.message,
            {
                "title": annotation.title,
                "file": annotation.file,
                "line": annotation.line,
                "col": annotation.column,
            },
        )

    def set_failed(self, message: str) -> None:
        super().set_failed(message)
        self._issue("error", message)


def create_reporter(use_annotations: bool, stream: Optional[TextIO] = None) -> Reporter:
    """Pick the output channel for the current host."""
    if use_annotations:
        return GitHubReporter(stream=stream)
    return LogReporter()
