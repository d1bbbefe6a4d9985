#!/usr/bin/env python3
"""
MCP Server for junit-reporter.
Provides tools for summarizing JUnit XML reports and rendering review markdown.
"""

import logging
import json
import asyncio
from fastmcp import FastMCP

import core
from junit_reporter.config import ReporterConfig, load_config, load_settings
from junit_reporter.exceptions import JUnitReporterError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# FastMCP server
mcp = FastMCP("junit-reporter")


@mcp.tool(
    name="summarize_junit_reports",
    description="""Count passed, failed, errored and skipped tests in JUnit XML reports.
        Args:
            paths: JUnit XML report file paths, parsed in order
    """
)
async def summarize_junit_reports(paths: list[str]) -> str:
    try:
        result = core.summarize_reports(paths)
        return json.dumps(result, indent=2)
    except JUnitReporterError as e:
        logger.error(f"Error in summarize_junit_reports: {str(e)}")
        return json.dumps({"error": str(e)})


@mcp.tool(
    name="report_junit_results",
    description="""Render markdown tables of failed, errored and skipped tests for a code review.
        Args:
            paths: JUnit XML report file paths, parsed in order
            show_skipped_tests: Warn about and list skipped tests (default: server setting)
            report_headers: Columns of the failures table (default: attributes common to all rows)
            skipped_test_report_headers: Columns of the skipped table (default: attributes common to all rows)
    """
)
async def report_junit_results(
    paths: list[str],
    show_skipped_tests: bool = None,
    report_headers: list[str] = None,
    skipped_test_report_headers: list[str] = None
) -> str:
    settings = load_settings()
    config = ReporterConfig(
        show_skipped_tests=settings.show_skipped_tests if show_skipped_tests is None else show_skipped_tests,
        report_headers=report_headers or settings.report_headers,
        skipped_test_report_headers=skipped_test_report_headers or settings.skipped_test_report_headers,
        repo_url=settings.repo_url,
        head_ref=settings.head_ref,
    )
    try:
        result = core.build_report(paths, config)
        return json.dumps(result, indent=2)
    except JUnitReporterError as e:
        logger.error(f"Error in report_junit_results: {str(e)}")
        return json.dumps({"error": str(e), "passed": False})


def get_port() -> int:
    """Server port from FASTMCP_PORT in the environment or .env file."""
    return int(load_config().get("FASTMCP_PORT", "8978"))


async def main():
    port = get_port()
    logger.info(f"Starting junit-reporter MCP server on port {port}")
    await mcp.run_async(transport="sse", host="0.0.0.0", port=port)


if __name__ == "__main__":
    asyncio.run(main())
