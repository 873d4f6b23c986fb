"""
Entry Manager - Lookup and construction of scoped DNS entries

This module finds existing scoped DNS entries in the configuration store
and builds the records written for new ones.
"""

import logging
import uuid
from typing import Dict, Iterable, List, Optional, Tuple

from ..providers.base_provider import DNSStoreError
from .domain_config import DomainConfig

logger = logging.getLogger(__name__)

SERVICE_KEY_PATTERN = "State:/Network/Service/[^/]+/DNS"
SERVICE_KEY_TEMPLATE = "State:/Network/Service/{identifier}/DNS"

MATCH_DOMAINS = "SupplementalMatchDomains"
SERVER_ADDRESSES = "ServerAddresses"
SEARCH_DOMAINS = "SearchDomains"


class EntryManager:
    """Manages scoped DNS entry lookup against a store client."""

    def __init__(self, store_client):
        """Initialize entry manager with a store client."""
        self.store_client = store_client

    def list_entries(self) -> List[Tuple[str, Dict]]:
        """Return every service DNS entry that carries match domains and resolvers."""
        entries = []
        for key in self.store_client.list_keys(SERVICE_KEY_PATTERN):
            try:
                value = self.store_client.get_value(key)
            except DNSStoreError as e:
                # Entries written by other services may not be readable
                logger.debug(f"Skipping unreadable entry {key}: {e}")
                continue
            if not value:
                continue
            if not isinstance(value.get(MATCH_DOMAINS), list):
                continue
            if not isinstance(value.get(SERVER_ADDRESSES), list):
                continue
            entries.append((key, value))

        logger.info(f"Found {len(entries)} scoped DNS entries")
        return entries

    def find_matching_entry(
        self, domains: List[str], resolvers: List[str]
    ) -> Optional[Tuple[str, Dict]]:
        """
        Find the first entry sharing a domain and a resolver with the request.

        Any overlap counts: the entry matches if at least one of its match
        domains is requested and at least one of its resolvers is requested.

        Args:
            domains: Requested match domains, forward and reverse
            resolvers: Requested resolver addresses

        Returns:
            (key, entry) for the first match, or None
        """
        for key, entry in self.list_entries():
            domains_match = overlaps(entry[MATCH_DOMAINS], domains)
            resolvers_match = overlaps(entry[SERVER_ADDRESSES], resolvers)

            if domains_match and resolvers_match:
                logger.info(f"Matched existing scoped DNS entry {key}")
                return key, entry

        logger.info("No matching scoped DNS entry found")
        return None

    def build_entry(self, domain_config: DomainConfig, resolvers: List[str]) -> Dict:
        """Build the store record for a scoped DNS entry."""
        return {
            MATCH_DOMAINS: domain_config.all,
            SERVER_ADDRESSES: list(resolvers),
            SEARCH_DOMAINS: list(domain_config.forward),
        }

    @staticmethod
    def new_service_key() -> str:
        """Generate a key for an entry that does not exist yet."""
        return SERVICE_KEY_TEMPLATE.format(identifier=str(uuid.uuid4()).upper())


def overlaps(existing: Iterable[str], requested: Iterable[str]) -> bool:
    """Check whether two lists share at least one item."""
    return not set(existing).isdisjoint(requested)
