"""
Configuration de la base de donnees SQLite pour MovieDB.

Ce module fournit :
- Engine SQLite (cles etrangeres activees, utilisable multi-thread)
- Session factory
- Fonction d'initialisation des tables
- Context managers de transaction et de conversion d'erreurs

La base de donnees est configuree via MOVIEDB_DATABASE_URL
(defaut: sqlite:///database/moviedatabase.db).
"""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from moviedb.core.exceptions import PersistenceError

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def create_db_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite : cree le repertoire parent du fichier si necessaire et
    active PRAGMA foreign_keys sur chaque nouvelle connexion (les cascades
    des tables d'association en dependent).

    Args :
        database_url : URL SQLAlchemy (ex: "sqlite:///database/moviedatabase.db")

    Retourne :
        L'engine configure
    """
    is_sqlite = database_url.startswith("sqlite")
    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = Path(database_url.replace("sqlite:///", "", 1))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine SQLite, en le creant si necessaire.

    Utilise la configuration de l'application pour le chemin de la BDD.
    """
    global _engine
    if _engine is None:
        from moviedb.config import Settings

        _engine = create_db_engine(Settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Une session correspond a une connexion : un DAO recoit sa session
    par injection et ne la partage pas entre threads.

    Yields:
        Session SQLModel connectee a l'engine SQLite
    """
    with Session(get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables si elles n'existent pas deja.

    Args :
        engine : Engine cible (defaut: get_engine())
    """
    # L'import est fait ici pour eviter les imports circulaires
    from moviedb.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine or get_engine())


@contextmanager
def transaction(session: Session, operation: str = "") -> Iterator[Session]:
    """
    Execute un bloc d'ecritures dans une transaction.

    Commit si le bloc se termine normalement, rollback sinon. Les erreurs
    SQLAlchemy sont converties en PersistenceError, les autres exceptions
    (KeyboardInterrupt compris) sont relancees telles quelles.

    Usage:
        with transaction(session, "creation du film"):
            session.add(model)
            session.flush()
            ...

    Args :
        session : Session active du DAO
        operation : Description de l'operation (logs et message d'erreur)
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        error = PersistenceError.from_exception(exc, operation)
        logger.error("Echec de transaction", operation=operation, code=error.code)
        raise error from exc
    except BaseException:
        session.rollback()
        raise


@contextmanager
def guard(operation: str = "") -> Iterator[None]:
    """Convertit les erreurs SQLAlchemy d'une lecture en PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        error = PersistenceError.from_exception(exc, operation)
        logger.error("Echec de lecture", operation=operation, code=error.code)
        raise error from exc
