"""
Implementation SQLModel du DAO Movie.

Implemente l'interface IMovieDao : CRUD sur la table movies et maintenance
des tables d'association movie_actors et movie_genres.

Chaque ecriture portant sur plusieurs instructions (film + associations)
s'execute dans une seule transaction : un echec en cours de boucle ne laisse
jamais un film avec des associations partielles.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import delete, insert
from sqlmodel import Session, select

from moviedb.core.entities.media import Movie
from moviedb.core.exceptions import PersistenceError, ValidationError
from moviedb.core.ports.dao import Association, IMovieDao
from moviedb.infrastructure.persistence.database import guard, transaction
from moviedb.infrastructure.persistence.models import (
    MovieActorLink,
    MovieGenreLink,
    MovieModel,
)

# Table d'association -> (modele, colonne de l'entite liee)
_LINKS = {
    Association.ACTORS: (MovieActorLink, "actor_id"),
    Association.GENRES: (MovieGenreLink, "genre_id"),
}


def _unique(ids: list[int]) -> list[int]:
    """Supprime les doublons en conservant l'ordre de premiere apparition."""
    return list(dict.fromkeys(ids))


class SQLModelMovieDao(IMovieDao):
    """
    DAO SQLModel pour les films.

    Implemente IMovieDao avec conversion entre l'entite Movie (domaine)
    et MovieModel + tables d'association (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le DAO avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    @staticmethod
    def _validate(movie: Movie) -> str:
        """Retourne le titre sans espaces de bordure ; leve ValidationError s'il est vide."""
        title = (movie.title or "").strip()
        if not title:
            raise ValidationError("title", "Le titre du film ne peut pas etre vide")
        return title

    def _link_column(self, association: Association):
        if not isinstance(association, Association):
            raise ValueError(f"Association inconnue : {association!r}")
        model, column_name = _LINKS[association]
        return model, getattr(model, column_name), column_name

    def _insert_links(self, movie_id: int, association: Association, ids: list[int]) -> None:
        """Insere une ligne d'association par ID distinct."""
        rows = _unique(ids)
        if not rows:
            return
        model, _, column_name = self._link_column(association)
        self._session.execute(
            insert(model),
            [{"movie_id": movie_id, column_name: linked_id} for linked_id in rows],
        )

    def _delete_links(self, movie_id: int, association: Association) -> None:
        model, _, _ = self._link_column(association)
        self._session.execute(delete(model).where(model.movie_id == movie_id))

    def _to_entity(self, model: MovieModel) -> Movie:
        return Movie(
            id=model.id,
            title=model.title,
            release_year=model.release_year,
            director=model.director,
            actor_ids=self.fetch_associated_ids(model.id, Association.ACTORS),
            genre_ids=self.fetch_associated_ids(model.id, Association.GENRES),
        )

    def fetch_associated_ids(self, movie_id: int, association: Association) -> list[int]:
        """
        Liste les IDs d'acteurs ou de genres associes a un film.

        Args :
            movie_id : ID du film
            association : Association.ACTORS ou Association.GENRES

        Retourne :
            Les IDs associes, tries par ordre croissant

        Raises :
            ValueError : si association n'est pas un membre de Association
            PersistenceError : en cas d'erreur du driver
        """
        model, column, _ = self._link_column(association)
        statement = select(column).where(model.movie_id == movie_id).order_by(column)
        with guard(f"lecture de {association.value}"):
            return list(self._session.exec(statement).all())

    def create(self, movie: Movie) -> int:
        """
        Insere le film puis ses associations, dans une seule transaction.

        L'ID genere est affecte a movie.id et retourne.

        Raises :
            ValidationError : si le titre est vide
            PersistenceError : si l'insertion echoue ou ne produit pas d'ID
        """
        title = self._validate(movie)
        with transaction(self._session, "creation du film"):
            model = MovieModel(
                title=title,
                release_year=movie.release_year,
                director=movie.director,
            )
            self._session.add(model)
            self._session.flush()
            movie_id = model.id
            if movie_id is None:
                raise PersistenceError(
                    f"Creation du film '{title}' : aucun ID genere"
                )
            self._insert_links(movie_id, Association.ACTORS, movie.actor_ids)
            self._insert_links(movie_id, Association.GENRES, movie.genre_ids)

        movie.id = movie_id
        movie.title = title
        logger.info(
            "Film cree",
            movie_id=movie_id,
            title=movie.title,
            actors=len(_unique(movie.actor_ids)),
            genres=len(_unique(movie.genre_ids)),
        )
        return movie_id

    def read(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID, avec ses acteurs et genres."""
        with guard("lecture du film"):
            model = self._session.get(MovieModel, movie_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_all(self) -> list[Movie]:
        """Liste tous les films tries par titre."""
        statement = select(MovieModel).order_by(MovieModel.title, MovieModel.id)
        with guard("liste des films"):
            models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def update(self, movie: Movie) -> bool:
        """
        Met a jour les champs du film et remplace toutes ses associations.

        Les lignes movie_genres et movie_actors du film sont supprimees puis
        re-inserees depuis movie.genre_ids et movie.actor_ids, sans calcul
        de difference.

        Retourne :
            True si le film existe et a ete mis a jour, False sinon
        """
        title = self._validate(movie)
        if movie.id is None:
            return False

        with transaction(self._session, "mise a jour du film"):
            model = self._session.get(MovieModel, movie.id)
            if model is None:
                return False
            model.title = title
            model.release_year = movie.release_year
            model.director = movie.director
            self._session.add(model)

            self._delete_links(movie.id, Association.GENRES)
            self._insert_links(movie.id, Association.GENRES, movie.genre_ids)
            self._delete_links(movie.id, Association.ACTORS)
            self._insert_links(movie.id, Association.ACTORS, movie.actor_ids)

        movie.title = title
        logger.info("Film mis a jour", movie_id=movie.id, title=title)
        return True

    def delete(self, movie: Movie) -> bool:
        """
        Supprime le film et ses lignes d'association.

        Retourne :
            True si le film a ete supprime, False s'il n'existait pas
        """
        if movie.id is None:
            return False

        with transaction(self._session, "suppression du film"):
            self._delete_links(movie.id, Association.ACTORS)
            self._delete_links(movie.id, Association.GENRES)
            result = self._session.execute(
                delete(MovieModel).where(MovieModel.id == movie.id)
            )
            deleted = result.rowcount > 0

        if deleted:
            logger.info("Film supprime", movie_id=movie.id)
        return deleted

    def add_actor_to_movie(self, actor_id: int, movie_id: int) -> bool:
        """Associe un acteur a un film. False si l'association existait deja."""
        return bool(self.add_actors_to_movie(movie_id, [actor_id]))

    def add_actors_to_movie(self, movie_id: int, actor_ids: list[int]) -> list[int]:
        """
        Associe des acteurs a un film en ignorant ceux deja associes.

        Retourne :
            Les IDs effectivement ajoutes (sans doublon)
        """
        existing = set(self.fetch_associated_ids(movie_id, Association.ACTORS))
        new_ids = [actor_id for actor_id in _unique(actor_ids) if actor_id not in existing]
        if not new_ids:
            return []

        with transaction(self._session, "association des acteurs"):
            self._insert_links(movie_id, Association.ACTORS, new_ids)

        logger.info("Acteurs associes", movie_id=movie_id, actor_ids=new_ids)
        return new_ids

    def add_genre_to_movie(self, genre_id: int, movie_id: int) -> bool:
        """Associe un genre a un film. False si l'association existait deja."""
        if genre_id in self.fetch_associated_ids(movie_id, Association.GENRES):
            return False
        with transaction(self._session, "association du genre"):
            self._insert_links(movie_id, Association.GENRES, [genre_id])
        logger.info("Genre associe", movie_id=movie_id, genre_id=genre_id)
        return True
