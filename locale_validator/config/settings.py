"""Validator configuration using Pydantic settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and CLI overrides."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # CI host
    ci: bool = Field(default=False, description="Running under a CI host (CI)")
    github_actions: bool = Field(default=False, description="Running under GitHub Actions (GITHUB_ACTIONS)")
    github_workspace: Optional[str] = Field(default=None, description="Checkout directory on the CI host")

    # Locale files
    locale_dir: Optional[Path] = Field(default=None, description="Explicit locale directory (LOCALE_DIR)")
    fallback_dir: Path = Field(default=Path("./../Locale"), description="Locale directory outside CI")
    main_language: str = Field(default="en.json", description="Reference locale file name")
    locale_pattern: str = Field(default="*.json", description="Glob for locale files")

    # Output
    annotations: Optional[bool] = Field(default=None, description="Emit workflow command annotations")

    @field_validator("ci", mode="before")
    @classmethod
    def any_ci_value_is_true(cls, value):
        # Hosts set CI to arbitrary names (CI=woodpecker); only empty means unset
        if isinstance(value, str):
            return bool(value.strip())
        return value

    @field_validator("github_actions", mode="before")
    @classmethod
    def empty_flag_is_false(cls, value):
        if isinstance(value, str) and not value.strip():
            return False
        return value

    @field_validator("main_language")
    @classmethod
    def main_language_is_json(cls, value: str) -> str:
        if not value.endswith(".json"):
            raise ValueError("must name a .json file, e.g. 'en.json'")
        return value

    @property
    def workspace_dir(self) -> Path:
        """Directory holding the locale files."""
        if self.locale_dir is not None:
            return self.locale_dir
        if self.ci:
            return Path(self.github_workspace or ".")
        return self.fallback_dir

    @property
    def reference_name(self) -> str:
        """File name of the reference locale, left out of discovery."""
        return Path(self.main_language).name

    @property
    def use_annotations(self) -> bool:
        if self.annotations is not None:
            return self.annotations
        return self.github_actions
