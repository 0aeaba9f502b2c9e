"""
Fixtures pytest partagees pour les tests du client TVDB.

Ce module contient les fixtures communes utilisees dans les tests:
- Cle API et identifiant de compte de test
- Client TVDB pointe vers un hote de test (intercepte par respx)
- Settings isoles de l'environnement
"""

from pathlib import Path
from typing import Iterator

import pytest

from tests.fixtures.tvdb_responses import ACCOUNT_ID, API_KEY, TEST_BASE_URL
from tvdb.adapters.api.tvdb_client import TVDBClient
from tvdb.config import Settings


@pytest.fixture
def api_key() -> str:
    """Cle API de test."""
    return API_KEY


@pytest.fixture
def account_id() -> str:
    """Identifiant de compte de test."""
    return ACCOUNT_ID


@pytest.fixture
def client(api_key: str) -> Iterator[TVDBClient]:
    """
    Client TVDB configure sur l'hote de test.

    Les requetes doivent etre interceptees avec @respx.mock.
    """
    tvdb = TVDBClient(api_key=api_key, base_url=TEST_BASE_URL)
    yield tvdb
    tvdb.close()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test sans fichier .env, log dans tmp_path.
    """
    return Settings(
        _env_file=None,
        api_key=API_KEY,
        base_url=TEST_BASE_URL,
        account_id=ACCOUNT_ID,
        log_file=tmp_path / "test.log",
    )
