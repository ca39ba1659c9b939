# acctscout/__init__.py
"""
Syntax validation for federated account identifiers (local-part@domain).
"""

from .verifier import (
    AccountIdentifierValidator,
    is_valid_account_identifier,
    is_valid_account_name,
    is_valid_domain,
    is_valid_local_part,
)

__version__ = "0.1.0"

__all__ = [
    "AccountIdentifierValidator",
    "is_valid_account_identifier",
    "is_valid_account_name",
    "is_valid_domain",
    "is_valid_local_part",
]
