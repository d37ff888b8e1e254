from __future__ import annotations

import pytest

from coinbase_exchange.core.auth import Credentials

from .helpers import SECRET


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="key-123", api_secret=SECRET, passphrase="pass-phrase")
