"""
Catalogue entities.

Plain data carriers for movies, actors and genres. The database is the
single source of truth: entities are built by the DAOs and never cached.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Movie:
    """
    Movie of the catalogue.

    Attributes:
        id: Database-assigned ID (None before insert)
        title: Movie title, required
        release_year: Release year
        director: Director name
        actor_ids: IDs of associated actors (movie_actors rows)
        genre_ids: IDs of associated genres (movie_genres rows)
    """

    id: Optional[int] = None
    title: str = ""
    release_year: int = 0
    director: str = ""
    actor_ids: list[int] = field(default_factory=list)
    genre_ids: list[int] = field(default_factory=list)

    @property
    def is_persisted(self) -> bool:
        """True once the movie has a database ID."""
        return self.id is not None and self.id > 0


@dataclass
class Actor:
    """
    Actor of the catalogue.

    Attributes:
        id: Database-assigned ID (None before insert)
        name: Full name, required
    """

    id: Optional[int] = None
    name: str = ""

    def __str__(self) -> str:
        return self.name


@dataclass
class Genre:
    """Genre of the catalogue, referenced by ID from Movie.genre_ids."""

    id: Optional[int] = None
    name: str = ""

    def __str__(self) -> str:
        return self.name
