"""Tests for configuration loading and environment overrides."""

import pytest
import tomlkit

from labgraph.config import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    get_config,
    get_docs_directories,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    import os

    for name in list(os.environ):
        if name.startswith("LABGRAPH_"):
            monkeypatch.delenv(name)


class TestParseToml:
    def test_plain_values(self):
        data = parse_toml('[site]\nbase_url = "https://lab.example"\n[digest]\nlatest_projects = 3\n')

        assert data == {"site": {"base_url": "https://lab.example"}, "digest": {"latest_projects": 3}}
        assert type(data["digest"]["latest_projects"]) is int

    def test_document_keeps_comments(self):
        content = "# lab site\n[site]\nbase_url = \"x\"\n"

        doc = parse_toml_document(content)
        doc["site"]["base_url"] = "y"

        assert tomlkit.dumps(doc) == "# lab site\n[site]\nbase_url = \"y\"\n"


class TestMergeConfigs:
    def test_deep_merge_does_not_mutate(self):
        merged = merge_configs(DEFAULT_CONFIG, {"site": {"pages_dir": "/notes"}})

        assert merged["site"]["pages_dir"] == "/notes"
        assert merged["site"]["home_path"] == "/index.html"
        assert DEFAULT_CONFIG["site"]["pages_dir"] == "/pages"

    def test_lists_replaced(self):
        merged = merge_configs(DEFAULT_CONFIG, {"docs": {"dirs": ["notes", "archive"]}})

        assert merged["docs"]["dirs"] == ["notes", "archive"]


class TestConfigFile:
    def test_found_in_parent(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("[docs]\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_load_merges_defaults(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[site]\nbase_url = "https://lab.example"\n')

        config = load_config(path)

        assert config["site"]["base_url"] == "https://lab.example"
        assert config["digest"]["latest_projects"] == 10

    def test_invalid_toml_raises(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[site\n")

        with pytest.raises(tomlkit.exceptions.ParseError):
            load_config(path)

    def test_defaults_without_file(self, tmp_path):
        config = get_config(tmp_path / "missing.toml")

        assert config == DEFAULT_CONFIG


class TestEnvOverrides:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("true", True),
            ("FALSE", False),
            ('["a", "b"]', ["a", "b"]),
            ('{"k": 1}', {"k": 1}),
            ("[not json", "[not json"),
            ("plain", "plain"),
        ],
    )
    def test_value_parsing(self, raw, expected):
        assert _try_parse_env_value(raw) == expected

    def test_section_and_key(self, monkeypatch):
        monkeypatch.setenv("LABGRAPH_SITE_BASE_URL", "https://env.example")
        monkeypatch.setenv("LABGRAPH_DOCS_DIRS", '["notes"]')

        config = _apply_env_overrides(merge_configs(DEFAULT_CONFIG, {}))

        assert config["site"]["base_url"] == "https://env.example"
        assert config["docs"]["dirs"] == ["notes"]

    def test_name_without_key_ignored(self, monkeypatch):
        monkeypatch.setenv("LABGRAPH_SITE", "x")

        config = _apply_env_overrides(merge_configs(DEFAULT_CONFIG, {}))

        assert config == DEFAULT_CONFIG

    def test_env_wins_over_file(self, tmp_path, monkeypatch):
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[logging]\nlevel = "INFO"\n')
        monkeypatch.setenv("LABGRAPH_LOGGING_LEVEL", "DEBUG")

        assert get_config(path)["logging"]["level"] == "DEBUG"


class TestDocsDirectories:
    def test_override_used_alone(self, tmp_path):
        override = tmp_path / "elsewhere"

        assert get_docs_directories(override, DEFAULT_CONFIG, tmp_path) == [override]

    def test_only_existing_dirs(self, tmp_path):
        (tmp_path / "notes").mkdir()
        config = merge_configs(DEFAULT_CONFIG, {"docs": {"dirs": ["notes", "missing"]}})

        assert get_docs_directories(None, config, tmp_path) == [tmp_path / "notes"]

    def test_string_dirs(self, tmp_path):
        (tmp_path / "notes").mkdir()
        config = merge_configs(DEFAULT_CONFIG, {"docs": {"dirs": "notes"}})

        assert get_docs_directories(None, config, tmp_path) == [tmp_path / "notes"]
