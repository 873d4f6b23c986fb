#!/usr/bin/env python3
"""
Scoped DNS Manager - Command Line Interface

Main entry point for the Scoped DNS Manager CLI.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from ..core.dns_manager import ScopedDNSManager, Verbosity
from ..core.domain_config import DomainConfig
from ..parsers.lists import parse_resolver_list

logger = logging.getLogger(__name__)

ACTIONS = ("add", "remove", "list")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Scoped DNS Manager - Bind domains and IP ranges to specific resolvers"
    )

    parser.add_argument(
        "action",
        type=str.lower,
        choices=ACTIONS,
        help="Add or remove a scoped DNS entry, or list existing entries",
    )

    parser.add_argument(
        "--resolvers",
        "-r",
        help="IP address(es) of DNS resolvers, comma-separated",
    )

    parser.add_argument(
        "--domains",
        "-d",
        help="Domain(s) to scope these resolvers for, comma-separated",
    )

    parser.add_argument(
        "--cidrs",
        "-i",
        help="IP address ranges in CIDR notation to scope to these resolvers",
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--verbose", "-v", action="store_true", help="Show detailed output"
    )
    output.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress all output"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        verbosity = Verbosity.VERBOSE
    elif args.quiet:
        verbosity = Verbosity.QUIET
    else:
        verbosity = Verbosity.NORMAL

    def report(message: str):
        if verbosity != Verbosity.QUIET:
            print(message)

    config_found = Path(args.config).exists()
    config = load_config(args.config) if config_found else get_default_config()
    config_logger(config, verbosity)
    if not config_found:
        logger.warning(f"Config file {args.config} not found, using defaults")

    try:
        dns_manager = ScopedDNSManager(config, verbosity)

        if args.action == "list":
            sys.exit(0 if dns_manager.list_entries() else 1)

        if args.domains is None:
            report("Error: --domains parameter is required")
            sys.exit(1)

        if args.resolvers is None:
            report("Error: --resolvers parameter is required")
            sys.exit(1)

        resolvers = parse_resolver_list(args.resolvers)
        if not resolvers:
            report("Error: no valid resolver addresses given")
            sys.exit(1)

        domain_config = DomainConfig.from_command_line(args.domains, args.cidrs)
        if not domain_config.all:
            report("Error: no valid domains or CIDR blocks given")
            sys.exit(1)

        if args.action == "add":
            success = dns_manager.add(domain_config, resolvers, dry_run=args.dry_run)
        else:
            success = dns_manager.remove(domain_config, resolvers, dry_run=args.dry_run)

        if success:
            sys.exit(0)
        else:
            report(f"Failed to {args.action} scoped DNS entry")
            sys.exit(1)

    except Exception as e:
        report(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    if not Path(config_path).exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
        logger.info(f"Configuration loaded from {config_path}")
        return config or get_default_config()
    except yaml.YAMLError as e:
        print(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"scutil": {"path": "/usr/sbin/scutil", "timeout": 10}},
        "default_provider": "scutil",
        "logging": {"level": "WARNING"},
    }


def config_logger(config: Dict, verbosity: Verbosity = Verbosity.NORMAL):
    """Configure logging."""
    logging_config = config.get("logging", None) or {}
    log_level = logging_config.get("level", "WARNING")

    if verbosity == Verbosity.VERBOSE:
        log_level = logging.DEBUG
    elif verbosity == Verbosity.QUIET:
        log_level = logging.CRITICAL

    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
