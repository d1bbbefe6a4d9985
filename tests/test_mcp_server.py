"""Tests for the MCP server tools."""

import asyncio
import json

import mcp_server


def call(tool, **kwargs):
    fn = getattr(tool, "fn", tool)
    return json.loads(asyncio.run(fn(**kwargs)))


def test_summarize_reports(fixture_path):
    result = call(mcp_server.summarize_junit_reports, paths=[fixture_path("rspec_fail.xml")])
    assert result["total"] == 198
    assert result["failed"] == 1
    assert result["skipped"] == 7
    assert len(result["skipped_tests"]) == 7


def test_summarize_missing_file(tmp_path):
    result = call(mcp_server.summarize_junit_reports, paths=[str(tmp_path / "missing.xml")])
    assert "missing.xml" in result["error"]


def test_report_results(fixture_path):
    result = call(mcp_server.report_junit_results, paths=[fixture_path("rspec_fail.xml")],
                  report_headers=["name", "file", "time"])
    assert result["passed"] is False
    assert result["failures"] == ["Tests have failed. See below for more information."]
    assert result["warnings"] == []
    assert "Name | File | Time|\n--- | --- | ---|\n" in result["markdown"]
    assert result["counts"] == {"total": 198, "passed": 190, "failed": 1, "errored": 0, "skipped": 7}


def test_report_results_falls_back_to_settings(fixture_path, tmp_path):
    (tmp_path / ".env").write_text("SHOW_SKIPPED_TESTS=true\nREPORT_HEADERS=name\n")
    result = call(mcp_server.report_junit_results, paths=[fixture_path("rspec_fail.xml")])
    assert result["warnings"] == ["Skipped 7 tests."]
    assert "### Tests: \n\nName|\n---|\n" in result["markdown"]


def test_report_results_arguments_override_settings(fixture_path, tmp_path):
    (tmp_path / ".env").write_text("SHOW_SKIPPED_TESTS=true\nREPORT_HEADERS=name\n")
    result = call(mcp_server.report_junit_results, paths=[fixture_path("rspec_fail.xml")],
                  show_skipped_tests=False, report_headers=["time"])
    assert result["warnings"] == []
    assert "### Tests: \n\nTime|\n---|\n" in result["markdown"]


def test_report_results_missing_file(tmp_path):
    result = call(mcp_server.report_junit_results, paths=[str(tmp_path / "missing.xml")])
    assert result["passed"] is False
    assert "missing.xml" in result["error"]


def test_report_results_unavailable_headers_keep_other_table(fixture_path):
    result = call(mcp_server.report_junit_results, paths=[fixture_path("rspec_fail.xml")],
                  show_skipped_tests=True, report_headers=["line"])
    assert result["passed"] is False
    assert "line" in result["error"]
    assert "### Skipped: " in result["markdown"]
    assert result["failures"] == ["Tests have failed. See below for more information."]


def test_port_from_env_file(tmp_path):
    assert mcp_server.get_port() == 8978
    (tmp_path / ".env").write_text("FASTMCP_PORT=9100\n")
    assert mcp_server.get_port() == 9100


def test_port_from_environment(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("FASTMCP_PORT=9100\n")
    monkeypatch.setenv("FASTMCP_PORT", "9200")
    assert mcp_server.get_port() == 9200
