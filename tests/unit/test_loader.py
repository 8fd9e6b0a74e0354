"""
Unit tests for locale file loading and discovery.
"""

from pathlib import Path

from locale_validator.errors import LocaleLoadError, ReferenceLoadError
from locale_validator.localization import (
    discover_locale_files,
    load_locale_file,
    load_reference_locale,
    resolve_locale_path,
)


class TestLoadLocaleFile:
    """Test load_locale_file."""

    def test_loads_valid_file(self, write_locale):
        path = write_locale("fr.json", {"localeCode": "fr", "messages": {"greeting": "salut"}})

        result = load_locale_file(path)

        assert result.success
        assert result.error is None
        assert result.path == path
        assert result.document.locale_code == "fr"
        assert result.document.messages == {"greeting": "salut"}
        assert '"greeting"' in result.source

    def test_locale_code_defaults_to_file_stem(self, write_locale):
        path = write_locale("pt-BR.json", {"messages": {"greeting": "oi"}})

        result = load_locale_file(path)

        assert result.document.locale_code == "pt-BR"

    def test_missing_file(self, temp_dir):
        result = load_locale_file(temp_dir / "nope.json")

        assert not result.success
        assert result.document is None
        assert isinstance(result.error, LocaleLoadError)
        assert not isinstance(result.error, ReferenceLoadError)
        assert result.error.message.startswith("Could not validate the nope.json language file. Reason: ")

    def test_malformed_json(self, write_locale):
        path = write_locale("de.json", '{"localeCode": "de", "messages": {')

        result = load_locale_file(path)

        assert not result.success
        assert "de.json" in result.error.message
        assert result.error.file == str(path)
        assert result.error.previous_error is not None

    def test_missing_messages(self, write_locale):
        path = write_locale("it.json", {"localeCode": "it"})

        result = load_locale_file(path)

        assert not result.success
        assert "messages" in result.error.reason

    def test_non_string_message_value(self, write_locale):
        path = write_locale("it.json", {"localeCode": "it", "messages": {"count": 3}})

        result = load_locale_file(path)

        assert not result.success
        assert "messages.count" in result.error.reason

    def test_invalid_utf8(self, temp_dir):
        path = temp_dir / "ja.json"
        path.write_bytes(b'{"messages": {"a": "\xff\xfe"}}')

        result = load_locale_file(path)

        assert not result.success

    def test_directory_instead_of_file(self, temp_dir):
        (temp_dir / "dir.json").mkdir()

        result = load_locale_file(temp_dir / "dir.json")

        assert not result.success

    def test_reference_failure_is_fatal(self, temp_dir):
        result = load_reference_locale(temp_dir / "en.json")

        assert not result.success
        assert isinstance(result.error, ReferenceLoadError)
        assert result.error.is_fatal()


class TestResolveLocalePath:
    """Test resolve_locale_path."""

    def test_bare_name_joins_workspace(self, temp_dir):
        assert resolve_locale_path("en.json", temp_dir) == temp_dir / "en.json"

    def test_relative_path_is_kept(self, temp_dir):
        assert resolve_locale_path("locales/en.json", temp_dir) == Path("locales/en.json")

    def test_absolute_path_is_kept(self, temp_dir):
        path = temp_dir / "other" / "en.json"

        assert resolve_locale_path(path, Path("elsewhere")) == path


class TestDiscoverLocaleFiles:
    """Test discover_locale_files."""

    def test_excludes_reference(self, locale_dir, write_locale):
        write_locale("fr.json", {"messages": {}})
        write_locale("es.json", {"messages": {}})

        files = discover_locale_files(locale_dir, "*.json", exclude="en.json")

        assert [path.name for path in files] == ["es.json", "fr.json"]

    def test_exclusion_matches_whole_name(self, locale_dir, write_locale):
        write_locale("ben.json", {"messages": {}})

        files = discover_locale_files(locale_dir, exclude="en.json")

        assert [path.name for path in files] == ["ben.json"]

    def test_without_exclusion_includes_reference(self, locale_dir):
        assert [path.name for path in discover_locale_files(locale_dir)] == ["en.json"]

    def test_ignores_other_files_and_subdirectories(self, locale_dir, write_locale):
        write_locale("notes.txt", "not a locale")
        (locale_dir / "nested").mkdir()
        (locale_dir / "nested" / "fr.json").write_text("{}", encoding="utf-8")
        (locale_dir / "folder.json").mkdir()

        files = discover_locale_files(locale_dir, exclude="en.json")

        assert files == []

    def test_custom_pattern(self, locale_dir, write_locale):
        write_locale("fr.locale.json", {"messages": {}})
        write_locale("fr.json", {"messages": {}})

        files = discover_locale_files(locale_dir, "*.locale.json")

        assert [path.name for path in files] == ["fr.locale.json"]

    def test_missing_directory(self, temp_dir):
        assert discover_locale_files(temp_dir / "missing") == []
