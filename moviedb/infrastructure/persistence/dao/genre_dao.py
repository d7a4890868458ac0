"""Implementation SQLModel du DAO Genre."""

from typing import Optional

from loguru import logger
from sqlmodel import Session, select

from moviedb.core.entities.media import Genre
from moviedb.core.exceptions import PersistenceError, ValidationError
from moviedb.core.ports.dao import IGenreDao
from moviedb.infrastructure.persistence.database import guard, transaction
from moviedb.infrastructure.persistence.models import GenreModel


class SQLModelGenreDao(IGenreDao):
    """DAO SQLModel pour les genres, references par ID depuis les films."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: GenreModel) -> Genre:
        return Genre(id=model.id, name=model.name)

    def create(self, genre: Genre) -> int:
        """Insere un genre et retourne l'ID genere (affecte aussi a genre.id)."""
        name = (genre.name or "").strip()
        if not name:
            raise ValidationError("name", "Le nom du genre ne peut pas etre vide")

        with transaction(self._session, "creation du genre"):
            model = GenreModel(name=name)
            self._session.add(model)
            self._session.flush()
            genre_id = model.id
            if genre_id is None:
                raise PersistenceError(f"Creation du genre '{name}' : aucun ID genere")

        genre.id = genre_id
        genre.name = name
        logger.info("Genre cree", genre_id=genre_id, name=name)
        return genre_id

    def read(self, genre_id: int) -> Optional[Genre]:
        """Recupere un genre par son ID."""
        with guard("lecture du genre"):
            model = self._session.get(GenreModel, genre_id)
        if model:
            return self._to_entity(model)
        return None

    def get_genre_by_name(self, name: str) -> Optional[Genre]:
        """Recupere un genre par son nom exact."""
        statement = (
            select(GenreModel).where(GenreModel.name == name).order_by(GenreModel.id)
        )
        with guard("recherche du genre par nom"):
            model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def list_all(self) -> list[Genre]:
        """Liste tous les genres tries par nom."""
        statement = select(GenreModel).order_by(GenreModel.name)
        with guard("liste des genres"):
            models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
