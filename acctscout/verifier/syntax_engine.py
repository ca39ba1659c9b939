# acctscout/verifier/syntax_engine.py
import logging
from typing import Optional, Tuple

from .domain_engine import MAX_DOMAIN_LEN, is_valid_domain
from .local_part_engine import MAX_LOCAL_PART_LEN, is_valid_local_part

LOG = logging.getLogger(__name__)

MAX_IDENTIFIER_LEN = MAX_LOCAL_PART_LEN + 1 + MAX_DOMAIN_LEN


def _split_on_separator(candidate: str) -> Optional[Tuple[str, str]]:
    # A backslash escapes the next char, so "\@" is not a separator.
    # More than one unescaped "@" (quoted or not) is ambiguous -> None.
    separator = -1
    i = 0
    n = len(candidate)
    while i < n:
        ch = candidate[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "@":
            if separator != -1:
                return None
            separator = i
        i += 1
    if separator == -1:
        return None
    return candidate[:separator], candidate[separator + 1:]


def is_valid_account_identifier(candidate: str) -> bool:
    """
    True for a fully qualified account identifier such as alice@example.org.
    The domain must have at least one dot; address literals and webfinger
    style acct: identifiers are rejected.
    """
    if not isinstance(candidate, str) or not candidate:
        return False
    if len(candidate) > MAX_IDENTIFIER_LEN:
        LOG.debug("identifier rejected: length %d > %d", len(candidate), MAX_IDENTIFIER_LEN)
        return False

    parts = _split_on_separator(candidate)
    if parts is None:
        LOG.debug("identifier rejected: no unique separator")
        return False

    local, domain = parts
    if not local or not domain:
        LOG.debug("identifier rejected: empty local-part or domain")
        return False
    if not is_valid_local_part(local):
        LOG.debug("identifier rejected: bad local-part")
        return False
    if not is_valid_domain(domain, fully_qualified=True):
        LOG.debug("identifier rejected: bad domain")
        return False
    return True


class AccountIdentifierValidator:
    """
    Validator for federated (ActivityPub-style) account identifiers.

    Accepts any fully qualified account identifier whose local-part is a valid
    mailbox local-part. This is not the same as a valid nickname, which
    callers may restrict further.

    Stateless; one instance can be shared across threads and tasks.
    """

    def is_valid_account_name(self, account_name: str) -> bool:
        """
        Validate an account name (the part before the "@").

        Args:
            account_name: Candidate local-part

        Returns:
            bool: True if it is a valid dot-atom or quoted-string local-part
        """
        return is_valid_local_part(account_name)

    def is_valid_local_part(self, local_part: str) -> bool:
        """
        Validate a local-part; same grammar as is_valid_account_name.

        Args:
            local_part: Candidate local-part

        Returns:
            bool: True if it is a valid dot-atom or quoted-string local-part
        """
        return is_valid_local_part(local_part)

    def is_valid_domain(self, domain: str, fully_qualified: bool = False) -> bool:
        """
        Validate a domain on its own, e.g. a server's advertised domain.

        Args:
            domain: Candidate domain or bracketed address literal
            fully_qualified: Require at least one dot and reject address literals

        Returns:
            bool: True if the domain is valid
        """
        return is_valid_domain(domain, fully_qualified=fully_qualified)

    def is_valid_account_identifier(self, acc: str) -> bool:
        """
        Validate a fully qualified account identifier (e.g. nickname@domain.org).

        Args:
            acc: Candidate identifier

        Returns:
            bool: True if the identifier is valid
        """
        return is_valid_account_identifier(acc)

    def __call__(self, acc: str) -> bool:
        return is_valid_account_identifier(acc)
