"""
CIDR - IPv4 CIDR blocks and their reverse lookup zones

This module parses IPv4 CIDR literals and expands them into the
in-addr.arpa zone names that cover exactly the same address range.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

import dns.name
import dns.reversename

logger = logging.getLogger(__name__)

REVERSE_DOMAIN = dns.reversename.ipv4_reverse_domain


class InvalidCIDR(ValueError):
    """Raised when a CIDR literal cannot be parsed."""


@dataclass(frozen=True)
class CIDRBlock:
    """An IPv4 address plus prefix length, used exactly as given."""

    network: Tuple[int, int, int, int]
    prefix: int

    def __str__(self) -> str:
        return f"{'.'.join(str(octet) for octet in self.network)}/{self.prefix}"

    def to_reverse_domains(self) -> List[str]:
        """Expand the block into its reverse lookup zone names."""
        return expand_reverse_zones(self)


def parse_cidr(text: str) -> CIDRBlock:
    """
    Parse an ``address/prefix`` literal.

    Args:
        text: CIDR literal such as ``192.168.1.0/24``

    Returns:
        The parsed CIDRBlock

    Raises:
        InvalidCIDR: if the literal is malformed or out of range
    """
    parts = text.strip().split("/")
    if len(parts) != 2:
        raise InvalidCIDR(f"Expected exactly one '/' in CIDR '{text}'")

    address, prefix_text = parts
    prefix = _parse_number(prefix_text, 32, f"prefix length in CIDR '{text}'")

    octet_texts = address.split(".")
    if len(octet_texts) != 4:
        raise InvalidCIDR(f"Expected 4 octets in CIDR '{text}'")

    octets = tuple(
        _parse_number(octet, 255, f"octet in CIDR '{text}'") for octet in octet_texts
    )
    return CIDRBlock(network=octets, prefix=prefix)


def _parse_number(text: str, maximum: int, what: str) -> int:
    # isdigit() also accepts superscripts and other unicode digits
    if not text or not text.isascii() or not text.isdigit():
        raise InvalidCIDR(f"Non-numeric {what}: '{text}'")
    value = int(text)
    if value > maximum:
        raise InvalidCIDR(f"Out of range {what}: {value}")
    return value


def parse_cidr_list(cidrs: Union[str, Iterable[str]]) -> List[CIDRBlock]:
    """
    Parse a comma-separated string (or list) of CIDR literals.

    Malformed entries are logged and skipped so the remaining valid
    entries still take effect.
    """
    if isinstance(cidrs, str):
        cidrs = cidrs.split(",")

    blocks = []
    for text in cidrs:
        text = text.strip()
        if not text:
            continue
        try:
            blocks.append(parse_cidr(text))
        except InvalidCIDR as e:
            logger.warning(f"Skipping invalid CIDR '{text}': {e}")

    return blocks


def expand_reverse_zones(block: CIDRBlock) -> List[str]:
    """
    Expand a CIDR block into the reverse zones that cover it.

    Reverse delegation only exists at octet boundaries, so a prefix that
    ends inside an octet is flattened into one zone per value that octet
    can take, e.g. ``192.168.1.128/25`` yields the 128 zones
    ``128.1.168.192.in-addr.arpa`` to ``255.1.168.192.in-addr.arpa``.

    Args:
        block: The CIDR block to expand

    Returns:
        Zone names in ascending order of the varying octet, or an empty
        list if the block cannot be expanded
    """
    full_octets, partial_bits = divmod(block.prefix, 8)
    network = block.network

    if partial_bits == 0:
        if full_octets > len(network):
            return []
        return [_reverse_name(network[:full_octets])]

    octet_index = full_octets
    if octet_index >= len(network):
        return []

    mask = (0xFF << (8 - partial_bits)) & 0xFF
    base_value = network[octet_index] & mask
    range_size = 1 << (8 - partial_bits)
    pinned = network[:octet_index]

    return [_reverse_name(pinned + (base_value + offset,)) for offset in range(range_size)]


def _reverse_name(octets: Tuple[int, ...]) -> str:
    """Build the in-addr.arpa name for the given leading octets."""
    labels = [str(octet) for octet in reversed(octets)]
    name = dns.name.Name(labels + list(REVERSE_DOMAIN.labels))
    return name.to_text(omit_final_dot=True)
