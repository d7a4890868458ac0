"""
Service du dialogue d'ajout d'acteurs a un film.

Orchestre le workflow pilote par l'interface :
- recherche ou creation d'un acteur a partir du nom saisi
- maintien d'une liste de travail (sans doublon par ID d'acteur)
- association des acteurs au film lors de la confirmation

Les actions de l'interface sont des methodes simples (on_add, on_confirm,
on_cancel, on_suggest) appelables sans environnement graphique.
"""

from enum import Enum
from typing import Callable, Optional

from loguru import logger

from moviedb.core.entities.media import Actor, Movie
from moviedb.core.exceptions import ValidationError
from moviedb.core.ports.dao import Association, IActorDao, IMovieDao


class AddOutcome(Enum):
    """Resultat d'une action 'Ajouter'."""

    STAGED = "staged"  # Acteur existant ajoute a la liste
    CREATED = "created"  # Acteur cree en base puis ajoute a la liste
    ALREADY_STAGED = "already_staged"  # Deja dans la liste, rien n'est ajoute


class ActorDialogController:
    """
    Controleur du dialogue 'Ajouter des acteurs'.

    Le film courant est injecte avant l'ouverture du dialogue. La liste de
    travail n'est persistee qu'a la confirmation et disparait a la fermeture.

    Attributes:
        current_movie: Film en cours d'edition
        working_list: Acteurs en attente d'association, dans l'ordre d'ajout
        input_buffer: Texte saisi dans le champ nom
        alert_visible: True si le dernier ajout visait un acteur deja present
        is_open: False une fois le dialogue ferme (confirmation ou annulation)
    """

    def __init__(
        self,
        actor_dao: IActorDao,
        movie_dao: IMovieDao,
        suggestion_min_chars: int = 3,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Initialise le controleur.

        Args:
            actor_dao: DAO des acteurs
            movie_dao: DAO des films (doit partager la session de actor_dao)
            suggestion_min_chars: Nombre minimum de caracteres pour les suggestions
            on_close: Callback invoque a la fermeture du dialogue
        """
        self._actor_dao = actor_dao
        self._movie_dao = movie_dao
        self._suggestion_min_chars = suggestion_min_chars
        self._on_close = on_close

        self.current_movie: Optional[Movie] = None
        self.working_list: list[Actor] = []
        self.input_buffer: str = ""
        self.alert_visible: bool = False
        self.is_open: bool = True

    def set_current_movie(self, movie: Movie) -> None:
        """Definit le film auquel les acteurs seront associes."""
        self.current_movie = movie

    def is_staged(self, actor: Actor) -> bool:
        """Verifie si un acteur (compare par ID) est deja dans la liste de travail."""
        return any(staged.id == actor.id for staged in self.working_list)

    def on_add(self) -> AddOutcome:
        """
        Action 'Ajouter' : recherche l'acteur saisi, le cree si besoin, l'ajoute a la liste.

        Le champ de saisie est vide apres un ajout ou une detection de doublon.
        En cas d'erreur de persistance le texte saisi est conserve.

        Returns:
            Le resultat de l'ajout

        Raises:
            ValidationError: si le nom saisi est vide (le dialogue reste ouvert)
            PersistenceError: si la recherche ou la creation echoue
        """
        self.alert_visible = False

        actor_name = self.input_buffer.strip()
        if not actor_name:
            raise ValidationError("name", "Le nom de l'acteur ne peut pas etre vide")

        actor = self._actor_dao.get_actor_by_name(actor_name)
        if actor is not None:
            outcome = self._stage(actor)
        else:
            outcome = self._create_and_stage(actor_name)

        self.input_buffer = ""
        return outcome

    def _stage(self, actor: Actor) -> AddOutcome:
        if self.is_staged(actor):
            self.alert_visible = True
            logger.debug("Acteur deja dans la liste", actor_id=actor.id, name=actor.name)
            return AddOutcome.ALREADY_STAGED
        self.working_list.append(actor)
        return AddOutcome.STAGED

    def _create_and_stage(self, actor_name: str) -> AddOutcome:
        actor_id = self._actor_dao.create(Actor(name=actor_name))
        created = self._actor_dao.read(actor_id) or Actor(id=actor_id, name=actor_name)
        self.working_list.append(created)
        return AddOutcome.CREATED

    def on_confirm(self) -> list[int]:
        """
        Action 'OK' : associe au film les acteurs de la liste qui ne le sont pas encore.

        Les acteurs deja associes sont ignores (aucune paire dupliquee).
        Le dialogue n'est ferme que si toutes les associations ont reussi.

        Returns:
            Les IDs des acteurs nouvellement associes

        Raises:
            ValidationError: si aucun film enregistre n'est defini
            PersistenceError: si l'association echoue (le dialogue reste ouvert)
        """
        movie = self.current_movie
        if movie is None or movie.id is None:
            raise ValidationError("movie", "Aucun film selectionne pour le dialogue")

        existing = set(self._movie_dao.fetch_associated_ids(movie.id, Association.ACTORS))
        to_link = [
            actor.id
            for actor in self.working_list
            if actor.id is not None and actor.id not in existing
        ]

        linked: list[int] = []
        if to_link:
            linked = self._movie_dao.add_actors_to_movie(movie.id, to_link)

        movie.actor_ids = self._movie_dao.fetch_associated_ids(movie.id, Association.ACTORS)
        logger.info(
            "Acteurs du dialogue associes",
            movie_id=movie.id,
            linked=linked,
            skipped=len(self.working_list) - len(linked),
        )
        self._close()
        return linked

    def on_cancel(self) -> None:
        """Action 'Annuler' : abandonne la liste de travail sans rien persister."""
        self.working_list.clear()
        self.input_buffer = ""
        self.alert_visible = False
        self._close()

    def on_suggest(self, prefix: str) -> list[str]:
        """
        Suggestions de noms pour la saisie en cours.

        Returns:
            Les noms commencant par prefix, ou [] si le prefixe est trop court
        """
        if len(prefix) < self._suggestion_min_chars:
            return []
        return self._actor_dao.find_actors_by_starting_name(prefix)

    def on_completion_selected(self, name: str) -> None:
        """Remplace le texte saisi par la suggestion choisie."""
        self.input_buffer = name

    def _close(self) -> None:
        self.is_open = False
        if self._on_close is not None:
            self._on_close()
