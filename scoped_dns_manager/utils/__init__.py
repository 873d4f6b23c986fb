"""
Utility functions and helpers.

This package contains utility functions for validation
and normalization of user input.
"""

from .validators import normalize_domain, validate_domain, validate_ipv4

__all__ = ["normalize_domain", "validate_domain", "validate_ipv4"]
