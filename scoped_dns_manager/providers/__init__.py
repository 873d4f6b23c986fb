"""
Configuration store implementations.

This package contains implementations for the stores that hold scoped
DNS entries: the macOS dynamic store via scutil and a mock store.
"""

from .base_provider import DNSStore, DNSStoreError
from .dns_client import DNSStoreClient
from .mock_provider import MockDNSStore
from .scutil_provider import ScutilStore

__all__ = ["DNSStore", "DNSStoreError", "DNSStoreClient", "MockDNSStore", "ScutilStore"]
