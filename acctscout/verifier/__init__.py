# acctscout/verifier/__init__.py

from .local_part_engine import is_valid_local_part
from .domain_engine import is_valid_domain
from .syntax_engine import (
    AccountIdentifierValidator,
    is_valid_account_identifier,
)

# the original API name for the local-part check
is_valid_account_name = is_valid_local_part

__all__ = [
    "AccountIdentifierValidator",
    "is_valid_local_part",
    "is_valid_account_name",
    "is_valid_domain",
    "is_valid_account_identifier",
]
