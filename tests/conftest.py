import json
from pathlib import Path

import pytest

from sdk_docs.assets import StaticAssets

FIXTURES = Path(__file__).parent / "fixtures"
SPECS_DIR = FIXTURES / "specs"
EXAMPLES_DIR = FIXTURES / "examples"


@pytest.fixture
def assets() -> StaticAssets:
    return StaticAssets.from_directories(SPECS_DIR, EXAMPLES_DIR)


@pytest.fixture
def server_api() -> dict:
    return json.loads((SPECS_DIR / "open-api3-1.4.x-server.json").read_text(encoding="utf-8"))
