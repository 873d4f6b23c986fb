"""
Behave environment configuration for Scoped DNS Manager scenarios.
"""

import io
import logging
import shutil
import tempfile
from pathlib import Path

import yaml
from rich.console import Console

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="scoped_dns_"))

    context.test_config = {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "logging": {"level": "DEBUG"},
    }

    context.test_config_file = context.test_data_dir / "test_config.yaml"
    with open(context.test_config_file, "w") as f:
        yaml.dump(context.test_config, f)

    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.output = io.StringIO()
    context.console = Console(file=context.output, width=500)
    context.result = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    logger.info(f"Completed scenario: {scenario.name}")


def after_all(context):
    """Clean up test environment after all tests."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info("Test environment cleanup complete")
