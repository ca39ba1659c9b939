# acctscout/verifier/domain_engine.py
import ipaddress
import re

MAX_DOMAIN_LEN = 253
MAX_LABEL_LEN = 63

# 1-63 chars, hyphens only inside
LABEL_REGEX = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")

IPV4_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
IPV4_REGEX = re.compile(rf"{IPV4_OCTET}(?:\.{IPV4_OCTET}){{3}}")

IPV6_TAG = "ipv6:"
IPV6_CHARS = frozenset("0123456789abcdefABCDEF:.")


def is_hostname(value: str, fully_qualified: bool = False) -> bool:
    """
    Dot-separated labels. An empty label (leading, trailing or doubled dot)
    fails the label regex. fully_qualified needs at least two labels and
    a top-level label that is not all digits.
    """
    if not value or len(value) > MAX_DOMAIN_LEN:
        return False
    labels = value.split(".")
    if fully_qualified and len(labels) < 2:
        return False
    if not all(LABEL_REGEX.fullmatch(label) for label in labels):
        return False
    # a TLD is never all-numeric, so 192.168.0.1 is an address, not a name
    if fully_qualified and labels[-1].isdigit():
        return False
    return True


def is_ipv4(value: str) -> bool:
    return IPV4_REGEX.fullmatch(value) is not None


def is_ipv6(value: str) -> bool:
    # restrict to hex/colon/dot first; rules out zone ids and whitespace
    if not value or not IPV6_CHARS.issuperset(value):
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_address_literal(value: str) -> bool:
    """
    Bracketed address: [a.b.c.d] or [IPv6:...]. The tag is case-insensitive.
    """
    if len(value) < 3 or value[0] != "[" or value[-1] != "]":
        return False
    inner = value[1:-1]
    if inner[:len(IPV6_TAG)].lower() == IPV6_TAG:
        return is_ipv6(inner[len(IPV6_TAG):])
    return is_ipv4(inner)


def is_valid_domain(candidate: str, fully_qualified: bool = False) -> bool:
    if not isinstance(candidate, str) or not candidate:
        return False
    if len(candidate) > MAX_DOMAIN_LEN:
        return False
    if candidate.startswith("["):
        # account domains are named hosts only
        if fully_qualified:
            return False
        return is_address_literal(candidate)
    return is_hostname(candidate, fully_qualified=fully_qualified)
