"""
Step definitions for Scoped DNS Manager scenarios.
"""

from behave import given, when, then

from scoped_dns_manager.cli.main import load_config
from scoped_dns_manager.core.dns_manager import ScopedDNSManager, Verbosity
from scoped_dns_manager.core.domain_config import DomainConfig
from scoped_dns_manager.core.entry_manager import MATCH_DOMAINS, SEARCH_DOMAINS
from scoped_dns_manager.parsers.lists import parse_resolver_list


def _entries(context):
    return context.dns_manager.entry_manager.list_entries()


def _only_entry(context):
    entries = _entries(context)
    assert len(entries) == 1, f"Expected one entry, found {len(entries)}"
    return entries[0][1]


@given("the scoped DNS manager uses the mock store")
def step_impl(context):
    """Configure the manager with the mock store."""
    config = load_config(str(context.test_config_file))
    context.dns_manager = ScopedDNSManager(
        config, Verbosity.VERBOSE, console=context.console
    )
    assert context.dns_manager.store_client is not None


@given('a scoped DNS entry for "{domains}" with resolvers "{resolvers}"')
def step_impl(context, domains, resolvers):
    """Create an existing entry in the store."""
    assert context.dns_manager.add(
        DomainConfig.from_command_line(domains), parse_resolver_list(resolvers)
    )


@when('I add domains "{domains}" and CIDRs "{cidrs}" with resolvers "{resolvers}"')
def step_impl(context, domains, cidrs, resolvers):
    """Add a scoped DNS entry."""
    context.result = context.dns_manager.add(
        DomainConfig.from_command_line(domains, cidrs), parse_resolver_list(resolvers)
    )


@when('I add only domains "{domains}" with resolvers "{resolvers}"')
def step_impl(context, domains, resolvers):
    """Add a scoped DNS entry without CIDR blocks."""
    context.result = context.dns_manager.add(
        DomainConfig.from_command_line(domains), parse_resolver_list(resolvers)
    )


@when('I remove domains "{domains}" with resolvers "{resolvers}"')
def step_impl(context, domains, resolvers):
    """Remove a scoped DNS entry."""
    context.result = context.dns_manager.remove(
        DomainConfig.from_command_line(domains), parse_resolver_list(resolvers)
    )


@then("the operation should succeed")
def step_impl(context):
    assert context.result is True, context.output.getvalue()


@then("the operation should fail")
def step_impl(context):
    assert context.result is False, context.output.getvalue()


@then("the store should contain {count:d} scoped DNS {noun}")
def step_impl(context, count, noun):
    """Verify the number of entries in the store."""
    entries = _entries(context)
    assert len(entries) == count, f"Expected {count} entries, found {len(entries)}"


@then('the entry match domains should be "{domains}"')
def step_impl(context, domains):
    entry = _only_entry(context)
    expected = [domain.strip() for domain in domains.split(",")]
    assert entry[MATCH_DOMAINS] == expected, f"Match domains: {entry[MATCH_DOMAINS]}"


@then('the entry search domains should be "{domains}"')
def step_impl(context, domains):
    entry = _only_entry(context)
    expected = [domain.strip() for domain in domains.split(",")]
    assert entry[SEARCH_DOMAINS] == expected, f"Search domains: {entry[SEARCH_DOMAINS]}"


@then("the entry should have {count:d} match domains")
def step_impl(context, count):
    entry = _only_entry(context)
    assert len(entry[MATCH_DOMAINS]) == count, f"Found {len(entry[MATCH_DOMAINS])}"


@then('listing the entries should show "{summary}"')
def step_impl(context, summary):
    """Verify the coalesced summary in the entry table."""
    assert context.dns_manager.list_entries()
    assert summary in context.output.getvalue(), context.output.getvalue()


@then('the output should contain "{text}"')
def step_impl(context, text):
    assert text in context.output.getvalue(), context.output.getvalue()
