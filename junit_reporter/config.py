"""Configuration for the reporter - .env file, environment and YAML settings."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

ENV_KEYS = ['SHOW_SKIPPED_TESTS', 'REPORT_HEADERS', 'SKIPPED_TEST_REPORT_HEADERS',
            'REPO_URL', 'HEAD_REF', 'FASTMCP_PORT']

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def load_config() -> dict:
    """Load config from environment variables and .env file.

    Environment variables take precedence over .env file values.
    """
    paths = [
        os.environ.get('JUNIT_REPORTER_CONFIG'),
        Path.cwd() / '.env',
    ]
    config = {}
    for p in paths:
        if p and Path(p).is_file():
            try:
                for line in Path(p).read_text().splitlines():
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        config[key.strip()] = value.strip()
                break
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to read config file {p}: {e}")

    for key in ENV_KEYS:
        env_value = os.environ.get(key)
        if env_value is not None:
            config[key] = env_value

    return config


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def parse_list(value) -> list[str]:
    """Accept a YAML list or a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(',') if item.strip()]
    return [str(item) for item in value]


@dataclass
class ReporterConfig:
    """Settings for JUnitReporter and the optional file links."""
    show_skipped_tests: bool = False
    report_headers: Optional[list[str]] = None
    skipped_test_report_headers: list[str] = field(default_factory=list)
    repo_url: Optional[str] = None
    head_ref: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: dict) -> "ReporterConfig":
        """Build settings from snake_case or upper-case (.env style) keys."""
        def pick(name):
            if name in data:
                return data[name]
            return data.get(name.upper())

        headers = pick('report_headers')
        return cls(
            show_skipped_tests=parse_bool(pick('show_skipped_tests')),
            report_headers=parse_list(headers) or None,
            skipped_test_report_headers=parse_list(pick('skipped_test_report_headers')),
            repo_url=pick('repo_url') or None,
            head_ref=pick('head_ref') or None,
        )


def load_settings(config_file: Optional[str] = None) -> ReporterConfig:
    """Load reporter settings from a YAML file, or from .env/environment.

    Args:
        config_file: Path to a YAML file with snake_case keys. If not given,
            load_config() is used.
    """
    if not config_file:
        return ReporterConfig.from_mapping(load_config())

    with open(config_file) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config file {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")
    logger.debug(f"Loaded settings from {config_file}")
    return ReporterConfig.from_mapping(data)
