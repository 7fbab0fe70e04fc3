"""
Shared fixtures.

The tests directory is put on sys.path so test modules can import ``helpers``.
"""

import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import ScriptedHttpClient  # noqa: E402
from helpers.factories import ACCOUNT_SID  # noqa: E402

from twilio_sdk.config import ClientConfig  # noqa: E402
from twilio_sdk.rest.client import RestClient  # noqa: E402


@pytest.fixture
def config():
    """Configuration with fake credentials."""
    return ClientConfig(account_sid=ACCOUNT_SID, auth_token="secret-token")


@pytest.fixture
def http():
    """Scripted transport; tests queue responses onto it."""
    return ScriptedHttpClient()


@pytest.fixture
def client(config, http):
    """RestClient wired to the scripted transport."""
    return RestClient(config, http_client=http)
