"""
Fixtures pytest partagees pour les tests MovieDB.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire (cles etrangeres activees) et session
- Catalogue pre-rempli : 6 acteurs, 6 genres, 5 films et leurs associations
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from moviedb.config import Settings
from moviedb.infrastructure.persistence.database import create_db_engine, init_db
from tests.fixtures.catalog import SeededCatalog, seed_catalog


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec toutes les tables creees."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur fichier temporaire (utilisable depuis plusieurs threads)."""
    engine = create_db_engine(f"sqlite:///{tmp_path}/moviedb-test.db")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire vide."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def catalog(session: Session) -> SeededCatalog:
    """Catalogue pre-rempli dans la session de test."""
    return seed_catalog(session)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base de donnees et logs.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        suggestion_min_chars=3,
        suggestion_debounce_ms=0,
        log_file=tmp_path / "test.log",
    )
