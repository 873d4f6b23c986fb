"""
Mock configuration store for testing and demonstration.

This module provides a mock store that keeps scoped DNS entries in memory
for safe testing and dry runs on hosts without a dynamic store.
"""

import copy
import logging
import re
from typing import Dict, List, Optional

from .base_provider import DNSStore, DNSStoreError

logger = logging.getLogger(__name__)


class MockDNSStore(DNSStore):
    """Mock configuration store for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock store."""
        self.values = {}
        self.notifications = []
        logger.info("Mock DNS store initialized")

    def list_keys(self, pattern: str) -> List[str]:
        """List keys matching a regular expression."""
        keys = [key for key in self.values if re.fullmatch(pattern, key)]
        logger.info(f"Mock: Listed {len(keys)} keys matching {pattern}")
        return keys

    def get_value(self, key: str) -> Optional[Dict]:
        """Get the value stored under a key."""
        value = self.values.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set_value(self, key: str, value: Dict) -> bool:
        """Create or replace the value stored under a key."""
        self.values[key] = copy.deepcopy(value)
        logger.info(f"Mock: Set {key}")
        return True

    def remove_value(self, key: str) -> bool:
        """Remove the value stored under a key."""
        if key not in self.values:
            raise DNSStoreError(f"Key {key} not found for removal")

        del self.values[key]
        logger.info(f"Mock: Removed {key}")
        return True

    def notify_value(self, key: str) -> bool:
        """Record a change notification for a key."""
        self.notifications.append(key)
        logger.info(f"Mock: Notified {key}")
        return True
