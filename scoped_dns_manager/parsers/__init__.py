"""
Parsers for comma-separated command line values.
"""

from .lists import parse_domain_list, parse_resolver_list, split_list

__all__ = ["parse_domain_list", "parse_resolver_list", "split_list"]
