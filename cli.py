#!/usr/bin/env python3
"""CLI for JUnit Reporter."""

import argparse
import io
import json
import logging
import sys

import core
from junit_reporter.config import load_settings, parse_list
from junit_reporter.exceptions import JUnitReporterError
from junit_reporter.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )


def _settings(args):
    """Config file/environment settings, overridden by command-line flags."""
    settings = load_settings(args.config)
    if args.show_skipped:
        settings.show_skipped_tests = True
    if args.headers:
        settings.report_headers = parse_list(args.headers)
    if args.skipped_headers:
        settings.skipped_test_report_headers = parse_list(args.skipped_headers)
    if args.repo_url:
        settings.repo_url = args.repo_url
    if args.head_ref:
        settings.head_ref = args.head_ref
    return settings


def cmd_report(args):
    """Report failed, errored and skipped tests as markdown."""
    try:
        settings = _settings(args)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load settings: {e}")
        return 1

    try:
        if args.format == 'json':
            result = core.build_report(args.paths, settings, root=args.root)
            _write(args, json.dumps(result, indent=2))
            if result.get("error"):
                logger.error(result["error"])
            return 0 if result["passed"] else 1
    except JUnitReporterError as e:
        logger.error(str(e))
        return 1

    buffer = io.StringIO() if args.output else None
    sink = ConsoleSink(stream=buffer)
    try:
        core.run_report(args.paths, settings, sink, root=args.root)
    except JUnitReporterError as e:
        logger.error(str(e))
        return 1
    finally:
        # whatever was rendered before an error still reaches the file
        if buffer is not None:
            with open(args.output, 'w') as out:
                out.write(buffer.getvalue())

    return 1 if sink.failed else 0


def _write(args, text: str):
    if args.output:
        with open(args.output, 'w') as out:
            out.write(text + "\n")
    else:
        print(text)


def cmd_summary(args):
    """Print test counts for the reports."""
    try:
        result = core.summarize_reports(args.paths)
    except JUnitReporterError as e:
        logger.error(str(e))
        return 1

    if args.format == 'json':
        print(json.dumps(result, indent=2))
    else:
        _print_summary(result)

    return 1 if result["failed"] or result["errored"] else 0


def _print_summary(result: dict):
    """Print human-readable summary."""
    print(f"\n{'='*60}")
    print(f"Test Results:")
    print(f"  Total:   {result['total']}")
    print(f"  Passed:  {result['passed']}")
    print(f"  Failed:  {result['failed']}")
    print(f"  Errored: {result['errored']}")
    print(f"  Skipped: {result['skipped']}")

    broken = result["failed_tests"] + result["errored_tests"]
    if broken:
        print(f"\nFailed Tests ({len(broken)}):")
        for name in broken[:10]:
            print(f"  - {name[:70]}")
        if len(broken) > 10:
            print(f"  ... and {len(broken) - 10} more")
    print(f"{'='*60}\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description='JUnit report summaries for code review')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('--config', help='YAML settings file (default: .env and environment)')

    sub = parser.add_subparsers(dest='command')

    p = sub.add_parser('report', help='Report failed and skipped tests as markdown')
    p.add_argument('paths', nargs='+', help='JUnit XML report files')
    p.add_argument('--show-skipped', action='store_true', help='Warn about and list skipped tests')
    p.add_argument('--headers', help='Columns of the failures table (comma-separated)')
    p.add_argument('--skipped-headers', help='Columns of the skipped table (comma-separated)')
    p.add_argument('--repo-url', help='Repository URL used to link test files')
    p.add_argument('--head-ref', help='Branch or commit used to link test files')
    p.add_argument('--root', default='.', help='Checkout directory for file links (default: .)')
    p.add_argument('--output', '-o', help='Write markdown to a file instead of stdout')
    p.add_argument('--format', '-f', choices=['text', 'json'], default='text')

    p = sub.add_parser('summary', help='Count passed, failed, errored and skipped tests')
    p.add_argument('paths', nargs='+', help='JUnit XML report files')
    p.add_argument('--format', '-f', choices=['text', 'json'], default='text')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    cmds = {
        'report': cmd_report,
        'summary': cmd_summary,
    }
    return cmds[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
