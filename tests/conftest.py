import pytest

from tests.helpers import make_event


@pytest.fixture
def event() -> dict:
    return make_event()
