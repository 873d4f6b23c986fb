"""
scutil configuration store implementation.

This module drives the macOS ``scutil`` utility to read and write scoped
DNS entries in the System Configuration dynamic store.
"""

import logging
import re
import subprocess
from typing import Dict, List, Optional, Tuple

from .base_provider import DNSStore, DNSStoreError

logger = logging.getLogger(__name__)

SUBKEY_PATTERN = re.compile(r"^\s*subKey \[\d+\] = (?P<key>\S+)\s*$")
ENTRY_PATTERN = re.compile(r"^(?P<name>\S+) :(?: (?P<value>.*))?$")
ERROR_PATTERN = re.compile(r"failed|denied|error", re.IGNORECASE)


class ScutilStore(DNSStore):
    """Dynamic store access through the scutil command line utility."""

    def __init__(self, config: Dict = None):
        """Initialize scutil store."""
        config = config or {}
        self.path = config.get("path", "/usr/sbin/scutil")
        self.timeout = config.get("timeout", 10)
        logger.info(f"scutil store initialized using {self.path}")

    def list_keys(self, pattern: str) -> List[str]:
        """List keys matching a regular expression."""
        output = self._run_commands([f"list {pattern}"])
        keys = []
        for line in output.splitlines():
            match = SUBKEY_PATTERN.match(line)
            if match:
                keys.append(match.group("key"))

        logger.debug(f"scutil listed {len(keys)} keys matching {pattern}")
        return keys

    def get_value(self, key: str) -> Optional[Dict]:
        """Get the dictionary stored under a key."""
        output = self._run_commands([f"show {key}"])
        if "No such key" in output:
            return None

        lines = [line.strip() for line in output.splitlines() if line.strip()]
        if not lines or lines[0] != "<dictionary> {":
            logger.debug(f"Unexpected scutil output for {key}: {output!r}")
            return None

        value, _ = _parse_dictionary(lines, 1)
        return value

    def set_value(self, key: str, value: Dict) -> bool:
        """Create or replace the dictionary stored under a key."""
        commands = ["d.init"]
        for name, item in value.items():
            commands.extend(_dictionary_add_commands(name, item))
        commands.append(f"set {key}")

        self._run_commands(commands, check_errors=True)
        logger.debug(f"scutil set {key}")
        return True

    def remove_value(self, key: str) -> bool:
        """Remove the value stored under a key."""
        self._run_commands([f"remove {key}"], check_errors=True)
        logger.debug(f"scutil removed {key}")
        return True

    def notify_value(self, key: str) -> bool:
        """Notify observers that a key changed."""
        self._run_commands([f"notify {key}"], check_errors=True)
        logger.debug(f"scutil notified {key}")
        return True

    def _run_commands(self, commands: List[str], check_errors: bool = False) -> str:
        """Feed commands to an interactive scutil session and return its output."""
        script = "\n".join(commands + ["quit"]) + "\n"
        try:
            result = subprocess.run(
                [self.path],
                input=script,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.error(f"scutil timed out after {self.timeout} seconds")
            raise DNSStoreError("scutil command timed out")
        except FileNotFoundError:
            raise DNSStoreError(f"scutil not found at {self.path}")

        if result.returncode != 0:
            logger.error(f"scutil stderr: {result.stderr}")
            raise DNSStoreError(
                f"scutil exited with status {result.returncode}: {result.stderr.strip()}"
            )

        if check_errors:
            messages = (result.stdout + result.stderr).strip()
            if ERROR_PATTERN.search(messages):
                raise DNSStoreError(f"scutil reported an error: {messages}")

        return result.stdout


def _dictionary_add_commands(name: str, item) -> List[str]:
    """Build the d.add commands for one dictionary entry."""
    values = item if isinstance(item, list) else [item]
    values = [str(value) for value in values]
    for value in values:
        if not value or any(char.isspace() for char in value):
            raise DNSStoreError(f"Cannot store {name} value {value!r} with scutil")

    if isinstance(item, list):
        # scutil rejects "d.add key *" without values
        if not values:
            return []
        return [f"d.add {name} * {' '.join(values)}"]

    return [f"d.add {name} {values[0]}"]


def _parse_dictionary(lines: List[str], index: int) -> Tuple[Dict, int]:
    """Parse scutil's dictionary listing starting after the opening brace."""
    result = {}
    while index < len(lines):
        line = lines[index]
        if line == "}":
            return result, index + 1

        match = ENTRY_PATTERN.match(line)
        if not match:
            raise DNSStoreError(f"Unexpected scutil output line: {line!r}")

        result[match.group("name")], index = _parse_value(
            match.group("value") or "", lines, index + 1
        )

    raise DNSStoreError("Unterminated dictionary in scutil output")


def _parse_array(lines: List[str], index: int) -> Tuple[List, int]:
    """Parse scutil's array listing starting after the opening brace."""
    result = []
    while index < len(lines):
        line = lines[index]
        if line == "}":
            return result, index + 1

        match = ENTRY_PATTERN.match(line)
        if not match:
            raise DNSStoreError(f"Unexpected scutil output line: {line!r}")

        item, index = _parse_value(match.group("value") or "", lines, index + 1)
        result.append(item)

    raise DNSStoreError("Unterminated array in scutil output")


def _parse_value(value: str, lines: List[str], index: int):
    if value == "<dictionary> {":
        return _parse_dictionary(lines, index)
    if value == "<array> {":
        return _parse_array(lines, index)
    return value, index
