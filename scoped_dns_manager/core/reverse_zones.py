"""
Reverse zone formatting

Turns the match domains of a scoped DNS entry back into a short,
human-readable summary by merging in-addr.arpa zones into CIDR notation.
The result is meant for display only.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

import dns.exception
import dns.name

from .cidr import REVERSE_DOMAIN


def format_domains_for_output(domains: Iterable[str]) -> str:
    """
    Format forward and reverse domains for display.

    Args:
        domains: Match domains, forward names and in-addr.arpa zones mixed

    Returns:
        Forward domains followed by the reverse zones as CIDR blocks,
        e.g. ``example.com, 192.168.1.128/25``
    """
    forward = []
    groups: Dict[Tuple[int, ...], Set[int]] = {}
    whole_space = False

    for domain in domains:
        octets = reverse_zone_octets(domain)
        if octets is None:
            forward.append(domain)
        elif not octets:
            whole_space = True
        else:
            # varying octet comes first in the zone name, last in the address
            groups.setdefault(octets[:-1], set()).add(octets[-1])

    cidrs = []
    if whole_space:
        cidrs.append("0.0.0.0/0")
    for stable in sorted(groups):
        cidrs.extend(_group_to_cidrs(stable, sorted(groups[stable])))

    parts = []
    if forward:
        parts.append(", ".join(forward))
    if cidrs:
        parts.append(", ".join(cidrs))

    return ", ".join(parts)


def reverse_zone_octets(domain: str) -> Optional[Tuple[int, ...]]:
    """
    Return the address octets a reverse zone pins, in network order.

    ``1.168.192.in-addr.arpa`` gives ``(192, 168, 1)`` and the bare
    ``in-addr.arpa`` gives ``()``. Anything that is not a numeric IPv4
    reverse zone gives None.
    """
    try:
        name = dns.name.from_text(domain)
    except dns.exception.DNSException:
        return None

    if not name.is_subdomain(REVERSE_DOMAIN):
        return None

    labels = name.relativize(REVERSE_DOMAIN).labels
    if len(labels) > 4:
        return None

    octets = []
    for label in reversed(labels):
        text = label.decode("ascii", errors="replace")
        if not text.isascii() or not text.isdigit() or int(text) > 255:
            return None
        octets.append(int(text))

    return tuple(octets)


def _group_to_cidrs(stable: Tuple[int, ...], values: List[int]) -> List[str]:
    """Render one group of zones sharing the same stable octets."""
    base_prefix = 8 * (len(stable) + 1)
    count = len(values)

    if count > 1 and _is_aligned_run(values):
        range_bits = count.bit_length() - 1
        return [_to_cidr(stable, values[0], base_prefix - range_bits)]

    return [_to_cidr(stable, value, base_prefix) for value in values]


def _is_aligned_run(values: List[int]) -> bool:
    """Check that sorted values form a power-of-two sized, aligned run."""
    count = len(values)
    contiguous = values[-1] - values[0] + 1 == count
    power_of_two = count & (count - 1) == 0
    return contiguous and power_of_two and values[0] % count == 0


def _to_cidr(stable: Tuple[int, ...], value: int, prefix: int) -> str:
    octets = [str(octet) for octet in stable] + [str(value)]
    octets += ["0"] * (4 - len(octets))
    return f"{'.'.join(octets)}/{prefix}"
