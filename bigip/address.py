"""
Classification of node addresses.

A node is addressed either by a literal IPv4/IPv6 address or, when the value
does not look like one, by a fully qualified domain name resolved by the
device. Both patterns are kept exactly as the device tooling has always
applied them, including the open right side of the IPv4 alternative.
"""

import re
from enum import Enum

LITERAL_ADDRESS_PATTERN = re.compile(r"^((?:[0-9]{1,3}\.){3}[0-9]{1,3})|(.*:[^%]*)$")

# xxx.xxx.xxx.xxx(%x)
# x:x(%x)
ROUTE_DOMAIN_PATTERN = re.compile(r"((?:(?:[0-9]{1,3}\.){3}[0-9]{1,3})|(?:.*:[^%]*))(?:%\d+)?")


class AddressMode(Enum):
    LITERAL = "literal"
    FQDN = "fqdn"


def is_literal_address(address):
    """Return True when the address is used as-is instead of as an FQDN.

    Args:
        address (str): node address from the configuration
    """
    return LITERAL_ADDRESS_PATTERN.search(address or "") is not None


def classify_address(address):
    """Return the AddressMode of a configured node address."""
    if is_literal_address(address):
        return AddressMode.LITERAL
    return AddressMode.FQDN


def strip_route_domain(address):
    """Return the address without its `%<id>` routing domain suffix.

    Values that match neither alternative are returned unchanged.

    Examples:
        10.0.0.5%2   -> 10.0.0.5
        2001:db8::1%3 -> 2001:db8::1
    """
    match = ROUTE_DOMAIN_PATTERN.search(address or "")
    if match is None:
        return address
    return match.group(1)
