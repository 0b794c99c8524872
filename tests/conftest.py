import pytest

from travelbase.config import API_KEY_ENV, ENDPOINT_ENV


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # keep real credentials (and any .env in the checkout) out of the tests
    monkeypatch.delenv(ENDPOINT_ENV, raising=False)
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
