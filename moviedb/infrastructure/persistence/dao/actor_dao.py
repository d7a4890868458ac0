"""
Implementation SQLModel du DAO Actor.

Implemente l'interface IActorDao pour la persistance et la recherche
des acteurs dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from moviedb.core.entities.media import Actor
from moviedb.core.exceptions import PersistenceError, ValidationError
from moviedb.core.ports.dao import IActorDao
from moviedb.infrastructure.persistence.database import guard, transaction
from moviedb.infrastructure.persistence.models import ActorModel


class SQLModelActorDao(IActorDao):
    """
    DAO SQLModel pour les acteurs.

    Table unique, sans association : les liens film <-> acteur
    sont geres par SQLModelMovieDao.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le DAO avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ActorModel) -> Actor:
        return Actor(id=model.id, name=model.name)

    def create(self, actor: Actor) -> int:
        """
        Insere un acteur et retourne l'ID genere (affecte aussi a actor.id).

        Raises :
            ValidationError : si le nom est vide
            PersistenceError : si l'insertion echoue
        """
        name = (actor.name or "").strip()
        if not name:
            raise ValidationError("name", "Le nom de l'acteur ne peut pas etre vide")

        with transaction(self._session, "creation de l'acteur"):
            model = ActorModel(name=name)
            self._session.add(model)
            self._session.flush()
            actor_id = model.id
            if actor_id is None:
                raise PersistenceError(f"Creation de l'acteur '{name}' : aucun ID genere")

        actor.id = actor_id
        actor.name = name
        logger.info("Acteur cree", actor_id=actor_id, name=name)
        return actor_id

    def read(self, actor_id: int) -> Optional[Actor]:
        """Recupere un acteur par son ID."""
        with guard("lecture de l'acteur"):
            model = self._session.get(ActorModel, actor_id)
        if model:
            return self._to_entity(model)
        return None

    def get_actor_by_name(self, name: str) -> Optional[Actor]:
        """Recupere un acteur par son nom exact. Le plus petit ID l'emporte."""
        statement = (
            select(ActorModel).where(ActorModel.name == name).order_by(ActorModel.id)
        )
        with guard("recherche de l'acteur par nom"):
            model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def find_actors_by_starting_name(self, prefix: str) -> list[str]:
        """
        Liste les noms d'acteurs commencant par prefix (semantique LIKE 'prefix%').

        Les caracteres % et _ du prefixe sont echappes. Un prefixe vide ou une
        erreur de la base donnent une liste vide : ce chemin alimente
        uniquement des suggestions de saisie.
        """
        if not prefix or not prefix.strip():
            return []

        statement = (
            select(ActorModel.name)
            .where(ActorModel.name.startswith(prefix, autoescape=True))
            .order_by(ActorModel.name)
        )
        try:
            return list(self._session.exec(statement).all())
        except SQLAlchemyError as exc:
            logger.warning("Suggestions d'acteurs indisponibles", prefix=prefix, error=str(exc))
            return []
