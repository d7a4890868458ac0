"""
Module de persistance SQLite pour MovieDB.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation,
  transactions
- models.py : Modeles SQLModel representant les tables de la base de donnees
- dao/ : DAOs convertissant entites de domaine <-> modeles

Usage:
    from moviedb.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
    movie_dao = SQLModelMovieDao(session)
"""

from moviedb.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    get_session,
    guard,
    init_db,
    transaction,
)
from moviedb.infrastructure.persistence.models import (
    ActorModel,
    GenreModel,
    MovieActorLink,
    MovieGenreLink,
    MovieModel,
)

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session",
    "guard",
    "init_db",
    "transaction",
    "MovieModel",
    "ActorModel",
    "GenreModel",
    "MovieActorLink",
    "MovieGenreLink",
]
