"""
DNS Store Client - Unified interface for scoped DNS configuration stores

This module provides a common interface for different configuration
stores, currently supporting the macOS dynamic store (via scutil) and an
in-memory mock store.
"""

import logging
from typing import Dict, List, Optional

from .base_provider import DNSStore
from .mock_provider import MockDNSStore
from .scutil_provider import ScutilStore

logger = logging.getLogger(__name__)


class DNSStoreClient:
    """Unified store client that supports multiple providers."""

    def __init__(self, config: Dict):
        """Initialize store client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSStore:
        """Get configuration store based on configuration."""
        provider_name = self.config.get("default_provider", "scutil")
        provider_config = self.config.get("dns_providers", {}).get(provider_name, {})

        if provider_name == "scutil":
            return ScutilStore(provider_config)
        elif provider_name == "mock":
            return MockDNSStore(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockDNSStore()

    def list_keys(self, pattern: str) -> List[str]:
        """List keys matching a regular expression."""
        return self.provider.list_keys(pattern)

    def get_value(self, key: str) -> Optional[Dict]:
        """Get the value stored under a key."""
        return self.provider.get_value(key)

    def set_value(self, key: str, value: Dict) -> bool:
        """Create or replace the value stored under a key."""
        return self.provider.set_value(key, value)

    def remove_value(self, key: str) -> bool:
        """Remove the value stored under a key."""
        return self.provider.remove_value(key)

    def notify_value(self, key: str) -> bool:
        """Notify observers that a key changed."""
        return self.provider.notify_value(key)
