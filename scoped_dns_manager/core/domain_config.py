"""
Domain Config - The set of match domains for one scoped DNS entry

Combines literal forward domains with the reverse lookup zones of any
requested CIDR blocks. This is the list handed to the configuration store.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .cidr import CIDRBlock, parse_cidr_list
from ..parsers.lists import parse_domain_list, split_list
from ..utils.validators import normalize_domain

logger = logging.getLogger(__name__)


@dataclass
class DomainConfig:
    """Forward domains plus the CIDR blocks scoped to the same resolvers."""

    forward: List[str] = field(default_factory=list)
    cidrs: List[CIDRBlock] = field(default_factory=list)

    @property
    def reverse(self) -> List[str]:
        """Reverse zones for every CIDR block, in input order."""
        zones = []
        for block in self.cidrs:
            expanded = block.to_reverse_domains()
            if not expanded:
                logger.warning(f"CIDR {block} does not expand to any reverse zone")
            zones.extend(expanded)
        return zones

    @property
    def all(self) -> List[str]:
        return self.forward + self.reverse

    @classmethod
    def build(
        cls, forward_texts: Iterable[str], cidr_texts: Iterable[str] = ()
    ) -> "DomainConfig":
        """
        Build a domain config from already split domain and CIDR lists.

        Args:
            forward_texts: Forward domains, normalized before use
            cidr_texts: CIDR literals; invalid ones are skipped

        Returns:
            DomainConfig with duplicates preserved
        """
        forward = [normalize_domain(text) for text in forward_texts]
        forward = [domain for domain in forward if domain]
        return cls(forward=forward, cidrs=parse_cidr_list(list(cidr_texts)))

    @classmethod
    def from_command_line(cls, domains: str, cidrs: Optional[str] = None) -> "DomainConfig":
        """Build a domain config from the raw comma-separated CLI values."""
        config = cls(
            forward=parse_domain_list(domains),
            cidrs=parse_cidr_list(split_list(cidrs)),
        )
        logger.debug(
            f"Domain config: {len(config.forward)} forward domain(s), "
            f"{len(config.cidrs)} CIDR block(s)"
        )
        return config
