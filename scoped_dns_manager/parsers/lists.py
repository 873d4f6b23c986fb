import logging
from typing import List, Optional

from ..utils.validators import normalize_domain, validate_domain, validate_ipv4

logger = logging.getLogger(__name__)


def split_list(text: Optional[str]) -> List[str]:
    """Split comma-separated CLI text into trimmed, non-empty items."""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def parse_domain_list(text: Optional[str]) -> List[str]:
    """Parse forward domains, normalizing each one."""
    domains = []

    for item in split_list(text):
        domain = normalize_domain(item)
        if not domain:
            continue

        # Kept anyway: the store accepts any match domain string
        if not validate_domain(domain):
            logger.warning(f"Domain '{domain}' does not look like a DNS name")

        domains.append(domain)

    return domains


def parse_resolver_list(text: Optional[str]) -> List[str]:
    """Parse resolver addresses, skipping anything that is not IPv4."""
    resolvers = []

    for position, item in enumerate(split_list(text), start=1):
        if not validate_ipv4(item):
            logger.warning(f"Invalid resolver '{item}' at position {position}, skipping")
            continue
        resolvers.append(item)

    logger.debug(f"Parsed {len(resolvers)} resolver(s)")
    return resolvers
