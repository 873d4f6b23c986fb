"""
Validators - Input validation for scoped DNS entries

This module provides validation functions for resolver addresses and
match domains, plus the normalization applied to forward domains.
"""

import ipaddress

import dns.exception
import dns.name


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        return False


def validate_domain(domain: str) -> bool:
    """
    Validate a match domain.

    Single-label names such as ``corp`` are accepted since scoped
    resolvers are commonly bound to internal suffixes.

    Args:
        domain: The domain to validate

    Returns:
        True if dnspython accepts it as a DNS name, False otherwise
    """
    if not domain or not isinstance(domain, str):
        return False

    if domain.startswith(".") or ".." in domain:
        return False

    try:
        dns.name.from_text(domain)
    except dns.exception.DNSException:
        return False

    return True


def normalize_domain(domain: str) -> str:
    """
    Normalize a forward domain as typed on the command line.

    Surrounding whitespace and a single leading dot are removed, so
    ``" .corp.example.com"`` becomes ``"corp.example.com"``.
    """
    if not domain:
        return domain

    domain = domain.strip()
    if domain.startswith("."):
        domain = domain[1:]

    return domain
