"""
Modeles SQLModel pour la base de donnees MovieDB.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films (titre, annee de sortie, realisateur)
- actors: Acteurs
- genres: Genres
- movie_actors: Association film <-> acteur
- movie_genres: Association film <-> genre

Les tables d'association ont une cle primaire composite (paires uniques)
et des cles etrangeres ON DELETE CASCADE.
"""

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class MovieModel(SQLModel, table=True):
    """Modele representant un film dans la base de donnees."""

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    release_year: int
    director: str = ""


class ActorModel(SQLModel, table=True):
    """
    Modele representant un acteur.

    Le nom n'est pas unique : l'unicite est assuree par la recherche
    par nom avant creation (dialogue d'ajout d'acteurs).
    """

    __tablename__ = "actors"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class GenreModel(SQLModel, table=True):
    """Modele representant un genre."""

    __tablename__ = "genres"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class MovieActorLink(SQLModel, table=True):
    """Association entre un film et un acteur."""

    __tablename__ = "movie_actors"

    movie_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True
        )
    )
    actor_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True
        )
    )


class MovieGenreLink(SQLModel, table=True):
    """Association entre un film et un genre."""

    __tablename__ = "movie_genres"

    movie_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True
        )
    )
    genre_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
        )
    )
