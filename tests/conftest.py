from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def example_response() -> str:
    return (FIXTURES / "example-response.json").read_text(encoding="utf-8")
