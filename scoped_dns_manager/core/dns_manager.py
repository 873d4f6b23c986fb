"""
Scoped DNS Manager - Add, remove and list scoped DNS entries

Binds a set of match domains (forward domains and reverse lookup zones)
to specific resolvers by writing a single entry into the configuration
store, and removes or lists such entries.
"""

import logging
from enum import IntEnum
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..providers.base_provider import DNSStoreError
from ..providers.dns_client import DNSStoreClient
from .domain_config import DomainConfig
from .entry_manager import (
    MATCH_DOMAINS,
    SEARCH_DOMAINS,
    SERVER_ADDRESSES,
    EntryManager,
)
from .reverse_zones import format_domains_for_output

logger = logging.getLogger(__name__)


class Verbosity(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2


class ScopedDNSManager:
    """Main class that orchestrates scoped DNS entry changes."""

    def __init__(
        self,
        config: Dict,
        verbosity: Verbosity = Verbosity.NORMAL,
        console: Optional[Console] = None,
    ):
        """Initialize the manager with configuration."""
        self.config = config
        self.verbosity = verbosity
        self.console = console or Console()
        self.store_client = DNSStoreClient(self.config)
        self.entry_manager = EntryManager(self.store_client)

    def add(
        self, domain_config: DomainConfig, resolvers: List[str], dry_run: bool = False
    ) -> bool:
        """
        Add a scoped DNS entry, replacing an overlapping one if present.

        Args:
            domain_config: Forward domains and CIDR blocks to scope
            resolvers: Resolver addresses for those domains
            dry_run: Show the entry without writing it

        Returns:
            True if the entry was written (or would be in a dry run)
        """
        domains = domain_config.all
        entry = self.entry_manager.build_entry(domain_config, resolvers)

        try:
            match = self.entry_manager.find_matching_entry(domains, resolvers)
            if match:
                key = match[0]
                self._print(f"Replacing existing scoped DNS entry {key}", Verbosity.VERBOSE)
            else:
                key = self.entry_manager.new_service_key()

            if dry_run:
                self._print_dry_run("add", key, entry)
                return True

            self.store_client.set_value(key, entry)
            self.store_client.notify_value(key)
        except DNSStoreError as e:
            logger.error(f"Failed to add scoped DNS entry: {e}")
            self._print(f"Failed to set or notify DNS config: {e}", style="red")
            return False

        logger.info(f"Added scoped DNS entry {key}")
        self._print_result(
            "Added",
            format_domains_for_output(domains),
            resolvers,
        )
        return True

    def remove(
        self, domain_config: DomainConfig, resolvers: List[str], dry_run: bool = False
    ) -> bool:
        """
        Remove the first scoped DNS entry overlapping the request.

        Args:
            domain_config: Forward domains and CIDR blocks to match
            resolvers: Resolver addresses to match
            dry_run: Show the entry without removing it

        Returns:
            True if an entry was removed (or would be in a dry run)
        """
        domains = domain_config.all

        try:
            match = self.entry_manager.find_matching_entry(domains, resolvers)
            if not match:
                self._print(
                    f"No scoped DNS entries found matching domains "
                    f"{format_domains_for_output(domains)} and resolvers {', '.join(resolvers)}",
                    style="yellow",
                )
                return False

            key, existing = match
            if dry_run:
                self._print_dry_run("remove", key, existing)
                return True

            self.store_client.remove_value(key)
            self.store_client.notify_value(key)
        except DNSStoreError as e:
            logger.error(f"Failed to remove scoped DNS entry: {e}")
            self._print(f"Failed to remove service key: {e}", style="red")
            return False

        logger.info(f"Removed scoped DNS entry {key}")
        self._print_result(
            "Removed",
            format_domains_for_output(existing[MATCH_DOMAINS]),
            existing[SERVER_ADDRESSES],
        )
        return True

    def list_entries(self) -> bool:
        """Display every scoped DNS entry in the store."""
        try:
            entries = self.entry_manager.list_entries()
        except DNSStoreError as e:
            logger.error(f"Failed to list scoped DNS entries: {e}")
            self._print(f"Failed to list scoped DNS entries: {e}", style="red")
            return False

        if not entries:
            self._print("No scoped DNS entries found", style="yellow")
            return True

        if self.verbosity == Verbosity.QUIET:
            return True

        table = Table(title="Scoped DNS Entries")
        table.add_column("Service Key", style="cyan")
        table.add_column("Domains", style="white")
        table.add_column("Resolvers", style="magenta")

        for key, entry in entries:
            table.add_row(
                escape(key),
                escape(format_domains_for_output(entry[MATCH_DOMAINS])),
                escape(", ".join(entry[SERVER_ADDRESSES])),
            )

        self.console.print(table)
        return True

    def _print_result(self, action: str, domains: str, resolvers: List[str]):
        """Print the short or detailed outcome of a change."""
        if self.verbosity >= Verbosity.VERBOSE:
            self._print(
                f"{action} scoped DNS entry for {domains} with resolver(s) {', '.join(resolvers)}",
                style="green",
            )
        else:
            self._print(f"{action} scoped DNS entry", style="green")

    def _print_dry_run(self, action: str, key: str, entry: Dict):
        """Show what a change would do without applying it."""
        self._print("DRY RUN MODE - No changes will be applied", style="yellow")
        self._print(f"Would {action} {key}")
        self._print(f"  Domains:   {format_domains_for_output(entry[MATCH_DOMAINS])}")
        self._print(f"  Resolvers: {', '.join(entry[SERVER_ADDRESSES])}")
        if entry.get(SEARCH_DOMAINS):
            self._print(f"  Search:    {', '.join(entry[SEARCH_DOMAINS])}", Verbosity.VERBOSE)

    def _print(
        self,
        message: str,
        minimum: Verbosity = Verbosity.NORMAL,
        style: Optional[str] = None,
    ):
        if self.verbosity == Verbosity.QUIET or self.verbosity < minimum:
            return
        self.console.print(escape(message), style=style, highlight=False)
