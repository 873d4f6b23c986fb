"""
Base configuration store interface.

This module defines the abstract base class that all scoped DNS
configuration stores must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class DNSStoreError(RuntimeError):
    """Raised when the configuration store rejects an operation."""


class DNSStore(ABC):
    """Abstract base class for scoped DNS configuration stores."""

    @abstractmethod
    def list_keys(self, pattern: str) -> List[str]:
        """List keys matching a regular expression."""
        pass

    @abstractmethod
    def get_value(self, key: str) -> Optional[Dict]:
        """Get the value stored under a key, or None if absent."""
        pass

    @abstractmethod
    def set_value(self, key: str, value: Dict) -> bool:
        """Create or replace the value stored under a key."""
        pass

    @abstractmethod
    def remove_value(self, key: str) -> bool:
        """Remove the value stored under a key."""
        pass

    @abstractmethod
    def notify_value(self, key: str) -> bool:
        """Notify observers that a key changed."""
        pass
