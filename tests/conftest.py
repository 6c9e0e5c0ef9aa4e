# SecurePass Test Configuration
# This file contains test settings and fixtures

import pytest
import sys
import os

# Add python-core to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python-core'))

from securepass import config as config_module
from securepass.config import ConfigurationHolder, HasherConfig
from securepass.hasher import PasswordHasher


# Low iteration count keeps unit tests fast
FAST_ITERATIONS = 1000


@pytest.fixture
def fast_config():
    """Provide a cheap configuration for unit tests."""
    return HasherConfig(
        algorithm="PBKDF2WithHmacSHA256",
        key_length=256,
        salt_length=64,
        iterations=FAST_ITERATIONS,
    )


@pytest.fixture
def hasher(fast_config):
    """Provide a hasher bound to the fast configuration."""
    return PasswordHasher(fast_config)


@pytest.fixture
def fresh_holder(monkeypatch):
    """Replace the process-wide configuration slot with an empty one."""
    holder = ConfigurationHolder()
    monkeypatch.setattr(config_module, "_holder", holder)
    return holder
