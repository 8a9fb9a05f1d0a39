import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def united_email():
    return {
        "from": "reservations@united.com",
        "subject": "Your trip confirmation",
        "body": (
            "Washington, DC (IAD) to Paris (CDG)\n"
            "Mon, Jan 15, 2024\n"
            "Confirmation: ABC123"
        ),
    }


@pytest.fixture
def bare_codes_email():
    return {
        "from": "noreply@example.org",
        "subject": "Your itinerary",
        "body": "Thanks for booking.\nSEA ... LAX\nSee you soon.",
    }


@pytest.fixture
def model_spy():
    """Stand-in for the model fallback that records every call."""
    from flightmail.parsers.types import ParseErrorKind, ParserResult

    class Spy:
        def __init__(self):
            self.calls = []
            self.result = ParserResult.fail(
                ParseErrorKind.BACKEND_UNAVAILABLE, "stubbed model", "model-fallback"
            )

        def __call__(self, from_addr, subject, body):
            self.calls.append((from_addr, subject, body))
            return self.result

    return Spy()
