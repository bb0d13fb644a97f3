import pytest

from fakes import PassthroughStore


@pytest.fixture(autouse=True)
def _reset_passthrough_store():
    PassthroughStore.created.clear()
    yield
    PassthroughStore.created.clear()
