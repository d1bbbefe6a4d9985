"""Tests for configuration loading."""

import pytest

from junit_reporter.config import ReporterConfig, load_config, load_settings, parse_bool, parse_list


def test_defaults():
    config = load_settings()
    assert config == ReporterConfig()
    assert config.report_headers is None
    assert config.skipped_test_report_headers == []


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("# reporter\nSHOW_SKIPPED_TESTS=true\nREPORT_HEADERS=name, time\n")
    config = load_settings()
    assert config.show_skipped_tests is True
    assert config.report_headers == ["name", "time"]


def test_environment_overrides_env_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("SHOW_SKIPPED_TESTS=true\n")
    monkeypatch.setenv("SHOW_SKIPPED_TESTS", "no")
    monkeypatch.setenv("SKIPPED_TEST_REPORT_HEADERS", "name,file")
    assert load_config()["SHOW_SKIPPED_TESTS"] == "no"
    config = load_settings()
    assert config.show_skipped_tests is False
    assert config.skipped_test_report_headers == ["name", "file"]


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "reporter.env"
    path.write_text("REPO_URL=https://github.com/org/repo\nHEAD_REF=main\n")
    monkeypatch.setenv("JUNIT_REPORTER_CONFIG", str(path))
    config = load_settings()
    assert config.repo_url == "https://github.com/org/repo"
    assert config.head_ref == "main"


def test_yaml_file(tmp_path):
    path = tmp_path / "junit.yaml"
    path.write_text(
        "show_skipped_tests: yes\n"
        "report_headers: [name, file, time]\n"
        "skipped_test_report_headers: name\n"
    )
    config = load_settings(str(path))
    assert config.show_skipped_tests is True
    assert config.report_headers == ["name", "file", "time"]
    assert config.skipped_test_report_headers == ["name"]


def test_yaml_must_be_mapping(tmp_path):
    path = tmp_path / "junit.yaml"
    path.write_text("- name\n- time\n")
    with pytest.raises(ValueError):
        load_settings(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "junit.yaml"
    path.write_text("report_headers: [name\n")
    with pytest.raises(ValueError):
        load_settings(str(path))


@pytest.mark.parametrize("value,expected", [
    ("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False), (None, False), (True, True),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_parse_list():
    assert parse_list(" name ,, time ") == ["name", "time"]
    assert parse_list(["name", 1]) == ["name", "1"]
    assert parse_list(None) == []


def test_undecodable_env_file(tmp_path):
    (tmp_path / ".env").write_bytes(b"REPORT_HEADERS=name\n\xff\xfe\xfa\n")
    config = load_settings()
    assert isinstance(config, ReporterConfig)
