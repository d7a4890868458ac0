"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'interface CLI :
configuration, base de donnees, DAOs et services.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.dao import (
    SQLModelActorDao,
    SQLModelGenreDao,
    SQLModelMovieDao,
)
from .infrastructure.persistence.database import get_engine, get_session, init_db
from .services.actor_dialog import ActorDialogController
from .services.suggestions import SuggestionFeed, make_actor_lookup


def _new_session() -> Session:
    """Ouvre une session dediee (utilisee par les recherches hors thread principal)."""
    return Session(get_engine())


def _build_actor_dialog(session: Session, suggestion_min_chars: int) -> ActorDialogController:
    """Construit le controleur du dialogue avec deux DAOs partageant la meme session."""
    return ActorDialogController(
        actor_dao=SQLModelActorDao(session),
        movie_dao=SQLModelMovieDao(session),
        suggestion_min_chars=suggestion_min_chars,
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        movie_dao = container.movie_dao()
        dialog = container.actor_dialog()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # DAOs - Factory pour nouvelle instance avec session fraiche
    movie_dao = providers.Factory(SQLModelMovieDao, session=session)
    actor_dao = providers.Factory(SQLModelActorDao, session=session)
    genre_dao = providers.Factory(SQLModelGenreDao, session=session)

    # Dialogue d'ajout d'acteurs - une session partagee par les deux DAOs
    actor_dialog = providers.Factory(
        _build_actor_dialog,
        session=session,
        suggestion_min_chars=config.provided.suggestion_min_chars,
    )

    # Suggestions - une session par recherche (execution hors thread principal)
    actor_lookup = providers.Singleton(
        make_actor_lookup,
        session_factory=providers.Object(_new_session),
    )
    suggestion_feed = providers.Factory(
        SuggestionFeed,
        lookup=actor_lookup,
        min_chars=config.provided.suggestion_min_chars,
        debounce_seconds=config.provided.suggestion_debounce_seconds,
    )
