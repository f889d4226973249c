"""Tests for searchlight.utils.settings and search option parsing."""
import json

import pytest

from searchlight.core.search.models import SearchContext, SearchOptions
from searchlight.exceptions import InvalidOptionsError
from searchlight.utils import resource_loader
from searchlight.utils.settings import SearchSettings, get_settings_path, load_settings, save_settings


class TestSearchOptions:
    def test_defaults(self) -> None:
        options = SearchOptions()
        assert options.case_sensitive is False
        assert options.flexible_whitespace is True
        assert options.fuzzy is False
        assert options.fuzzy_threshold == 0.6
        assert options.auto_scroll is True

    def test_camel_case_aliases(self) -> None:
        options = SearchOptions.from_dict({"caseSensitive": True, "fuzzyThreshold": 0.8})
        assert options.case_sensitive is True
        assert options.fuzzy_threshold == 0.8

    def test_threshold_range(self) -> None:
        with pytest.raises(InvalidOptionsError):
            SearchOptions(fuzzy_threshold=-0.1)
        with pytest.raises(InvalidOptionsError):
            SearchOptions(fuzzy_threshold=1.01)
        assert SearchOptions(fuzzy_threshold=1).fuzzy_threshold == 1

    def test_type_checks(self) -> None:
        with pytest.raises(InvalidOptionsError):
            SearchOptions(fuzzy="yes")
        with pytest.raises(InvalidOptionsError):
            SearchOptions(fuzzy_threshold=True)

    def test_invalid_options_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SearchOptions.from_dict({"unknown": 1})

    def test_merged_keeps_unset_fields(self) -> None:
        base = SearchOptions(case_sensitive=True, auto_scroll=False)
        merged = base.merged({"fuzzy": True})
        assert merged == SearchOptions(case_sensitive=True, auto_scroll=False, fuzzy=True)
        assert base.merged(None) is base


class TestSearchContext:
    def test_coerce(self) -> None:
        assert SearchContext.coerce("abc") == SearchContext("abc")
        context = SearchContext.coerce({"query": "abc", "options": SearchOptions(fuzzy=True)})
        assert context.options["fuzzy"] is True

    def test_coerce_needs_query(self) -> None:
        with pytest.raises(InvalidOptionsError):
            SearchContext.coerce({"options": {}})


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        assert load_settings(tmp_path / "missing.json") == SearchSettings()

    def test_reads_file(self, tmp_path) -> None:
        path = tmp_path / "search.json"
        path.write_text(json.dumps({
            "options": {"fuzzy": True, "fuzzyThreshold": 0.75},
            "highlight_class": "hit",
        }), encoding="utf-8")

        settings = load_settings(path)

        assert settings.options.fuzzy is True
        assert settings.options.fuzzy_threshold == 0.75
        assert settings.highlight_class == "hit"
        assert settings.active_class == "active"

    def test_corrupt_file_gives_defaults(self, tmp_path) -> None:
        path = tmp_path / "search.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == SearchSettings()

    def test_invalid_value_raises(self, tmp_path) -> None:
        path = tmp_path / "search.json"
        path.write_text(json.dumps({"options": {"fuzzy_threshold": 3}}), encoding="utf-8")
        with pytest.raises(InvalidOptionsError):
            load_settings(path)

    def test_save_then_load(self, tmp_path) -> None:
        settings = SearchSettings(options=SearchOptions(case_sensitive=True), active_class="cur")
        path = tmp_path / "nested" / "search.json"
        assert save_settings(settings, path)
        assert load_settings(path) == settings

    def test_default_path_uses_config_dir(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr("searchlight.utils.settings.get_config_dir", lambda: tmp_path)
        assert get_settings_path() == str(tmp_path / "search.json")


class TestResourceLoader:
    def test_config_dir_created(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(resource_loader.sys, "platform", "linux")
        monkeypatch.setattr(resource_loader.os, "name", "posix")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        config_dir = resource_loader.get_config_dir("SearchlightTest")
        assert config_dir == tmp_path / "SearchlightTest"
        assert config_dir.is_dir()
