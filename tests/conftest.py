"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from eventmail.api.dependencies import get_history
from eventmail.main import app

SCIENCE_FUN = """\
Sun, Jan 11, 2026 at 10 AM
Science Fun
800 Foster City Blvd, Foster City
Hosted by JBN and Wornick Jewish Day School
https://www.wornickjds.org/forms-and-registrations/science-fun"""

NEWBORN_PLAYGROUP = """\
Sun, Jan 25, 2026 at 10:30 AM
Peninsula Newborn Playgroup for Babies 0 - 9 Months
Jewish Family & Children's Services · Palo Alto
Hosted by JBN
https://www.eventbrite.com/e/peninsula-newborn-playgroup"""


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_history():
    """Start every test with an empty request history."""
    get_history().clear()
    yield
    get_history().clear()
