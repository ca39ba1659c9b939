"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Make the package importable without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'DEBUG')
os.environ.setdefault('CHUNK_SIZE', '1000')
os.environ.setdefault('WORKER_CONCURRENCY', '8')


@pytest.fixture
def validator():
    """Shared stateless validator instance."""
    from acctscout.verifier import AccountIdentifierValidator
    return AccountIdentifierValidator()


@pytest.fixture
def write_file(tmp_path):
    """Write bytes to a file under tmp_path and return its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_bytes(content)
        return path
    return _write
