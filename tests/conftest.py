"""
Pytest configuration and shared fixtures for totp_core tests.

Provides:
- The RFC 4226 / RFC 6238 reference secret in Base32 and raw form
- The published HOTP codes for that secret
- A clean environment without TOTP_* variables
"""
import pytest
import sys
from pathlib import Path

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))


# ============================================
# Reference vectors
# ============================================

@pytest.fixture
def rfc_secret():
    """Base32 form of the ASCII key "12345678901234567890" used by both RFCs."""
    return "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def rfc_key():
    return b"12345678901234567890"


@pytest.fixture
def rfc4226_codes():
    """RFC 4226 Appendix D: 6-digit HOTP values for counters 0..9."""
    return [
        "755224", "287082", "359152", "969429", "338314",
        "254676", "287922", "162583", "399871", "520489",
    ]


# ============================================
# Environment
# ============================================

@pytest.fixture(autouse=True)
def clean_totp_env(monkeypatch):
    """Keep settings and secrets from the developer's shell out of the tests."""
    for name in ("TOTP_SECRET", "TOTP_DIGITS", "TOTP_DISCREPANCY", "TOTP_SECRET_LENGTH"):
        monkeypatch.delenv(name, raising=False)
