"""
Scoped DNS Manager - Per-domain resolvers for macOS

A tool for binding forward domains and IPv4 address ranges to specific
DNS resolvers through scoped entries in the system configuration store.
"""

__version__ = "1.0.0"
__author__ = "Scoped DNS Manager Team"
__description__ = "Scoped DNS resolver configuration by domain and CIDR"

from .core.dns_manager import ScopedDNSManager
from .core.domain_config import DomainConfig
from .providers.dns_client import DNSStoreClient

__all__ = [
    "ScopedDNSManager",
    "DomainConfig",
    "DNSStoreClient",
]
