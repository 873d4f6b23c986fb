"""
Core scoped DNS functionality.

This package contains CIDR to reverse zone conversion, the domain set
handed to the configuration store, and the entry management logic.
"""

from .cidr import CIDRBlock, InvalidCIDR, expand_reverse_zones, parse_cidr
from .dns_manager import ScopedDNSManager, Verbosity
from .domain_config import DomainConfig
from .entry_manager import EntryManager
from .reverse_zones import format_domains_for_output

__all__ = [
    "CIDRBlock",
    "InvalidCIDR",
    "expand_reverse_zones",
    "parse_cidr",
    "ScopedDNSManager",
    "Verbosity",
    "DomainConfig",
    "EntryManager",
    "format_domains_for_output",
]
