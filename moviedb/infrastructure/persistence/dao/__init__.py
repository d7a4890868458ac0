"""
Implementations SQLModel des DAOs.

Ce module contient les implementations concretes des interfaces DAO
definies dans moviedb/core/ports/dao.py, utilisant SQLModel pour
la persistance SQLite.

Chaque DAO :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Leve PersistenceError sur toute erreur du driver
"""

from moviedb.infrastructure.persistence.dao.actor_dao import SQLModelActorDao
from moviedb.infrastructure.persistence.dao.genre_dao import SQLModelGenreDao
from moviedb.infrastructure.persistence.dao.movie_dao import SQLModelMovieDao

__all__ = [
    "SQLModelMovieDao",
    "SQLModelActorDao",
    "SQLModelGenreDao",
]
