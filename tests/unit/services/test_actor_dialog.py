"""
Tests unitaires pour ActorDialogController.

Tests couvrant:
- on_add : validation, ajout d'un acteur existant, creation, doublon
- on_confirm : association sans doublon, fermeture, echec sans fermeture
- on_cancel : rien n'est persiste
- on_suggest / on_completion_selected
"""

from unittest.mock import MagicMock

import pytest
from sqlmodel import func, select

from moviedb.core.entities.media import Actor, Movie
from moviedb.core.exceptions import PersistenceError, ValidationError
from moviedb.core.ports.dao import IActorDao, IMovieDao
from moviedb.infrastructure.persistence.dao import SQLModelActorDao, SQLModelMovieDao
from moviedb.infrastructure.persistence.models import ActorModel, MovieActorLink
from moviedb.services.actor_dialog import ActorDialogController, AddOutcome


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def on_close() -> MagicMock:
    """Callback de fermeture du dialogue."""
    return MagicMock()


@pytest.fixture
def dialog(session, catalog, on_close) -> ActorDialogController:
    """Dialogue sur la base pre-remplie, film courant : Inception."""
    movie_dao = SQLModelMovieDao(session)
    controller = ActorDialogController(
        actor_dao=SQLModelActorDao(session),
        movie_dao=movie_dao,
        on_close=on_close,
    )
    controller.set_current_movie(movie_dao.read(catalog.movies["Inception"]))
    return controller


@pytest.fixture
def mock_actor_dao() -> MagicMock:
    """Mock de IActorDao : aucun acteur connu par defaut."""
    mock = MagicMock(spec=IActorDao)
    mock.get_actor_by_name.return_value = None
    mock.find_actors_by_starting_name.return_value = []
    return mock


@pytest.fixture
def mock_movie_dao() -> MagicMock:
    """Mock de IMovieDao : aucun acteur associe par defaut."""
    mock = MagicMock(spec=IMovieDao)
    mock.fetch_associated_ids.return_value = []
    return mock


def _links_for(session, movie_id: int, actor_id: int) -> int:
    statement = (
        select(func.count())
        .select_from(MovieActorLink)
        .where(MovieActorLink.movie_id == movie_id, MovieActorLink.actor_id == actor_id)
    )
    return session.exec(statement).one()


# ============================================================================
# on_add
# ============================================================================


class TestOnAdd:
    """Tests pour l'action 'Ajouter'."""

    def test_empty_input_raises_validation_error(self, dialog):
        """Un nom vide leve ValidationError et le dialogue reste ouvert."""
        dialog.input_buffer = "   "

        with pytest.raises(ValidationError):
            dialog.on_add()

        assert dialog.working_list == []
        assert dialog.is_open

    def test_existing_actor_is_staged(self, dialog, catalog):
        """Un acteur existant est ajoute a la liste et le champ est vide."""
        dialog.input_buffer = "  Margot Robbie "

        outcome = dialog.on_add()

        assert outcome is AddOutcome.STAGED
        assert dialog.working_list == [
            Actor(id=catalog.actors["Margot Robbie"], name="Margot Robbie")
        ]
        assert dialog.input_buffer == ""
        assert not dialog.alert_visible

    def test_same_actor_twice_stages_once(self, dialog):
        """Ajouter deux fois le meme acteur donne une liste de taille 1."""
        dialog.input_buffer = "Jamie Foxx"
        dialog.on_add()
        dialog.input_buffer = "Jamie Foxx"

        outcome = dialog.on_add()

        assert outcome is AddOutcome.ALREADY_STAGED
        assert len(dialog.working_list) == 1
        assert dialog.alert_visible
        assert dialog.input_buffer == ""

    def test_alert_reset_on_next_add(self, dialog):
        """L'alerte de doublon disparait a l'ajout suivant."""
        dialog.input_buffer = "Jamie Foxx"
        dialog.on_add()
        dialog.input_buffer = "Jamie Foxx"
        dialog.on_add()

        dialog.input_buffer = "Meryl Streep"
        dialog.on_add()

        assert not dialog.alert_visible

    def test_unknown_actor_is_created(self, dialog, session):
        """Un acteur inconnu est cree en base puis ajoute a la liste."""
        dialog.input_buffer = "Tom Hanks"

        outcome = dialog.on_add()

        assert outcome is AddOutcome.CREATED
        created = session.exec(select(ActorModel).where(ActorModel.name == "Tom Hanks")).one()
        assert dialog.working_list == [Actor(id=created.id, name="Tom Hanks")]
        assert dialog.input_buffer == ""

    def test_created_actor_found_on_next_add(self, dialog, session):
        """Un acteur cree dans la session n'est pas recree au deuxieme ajout."""
        dialog.input_buffer = "Tom Hanks"
        dialog.on_add()
        dialog.input_buffer = "Tom Hanks"

        assert dialog.on_add() is AddOutcome.ALREADY_STAGED
        count = session.exec(
            select(func.count()).select_from(ActorModel).where(ActorModel.name == "Tom Hanks")
        ).one()
        assert count == 1

    def test_persistence_error_keeps_input(self, mock_actor_dao, mock_movie_dao):
        """Une erreur a la creation remonte et conserve le texte saisi."""
        mock_actor_dao.create.side_effect = PersistenceError("disk full", code="SQLITE_FULL")
        controller = ActorDialogController(mock_actor_dao, mock_movie_dao)
        controller.input_buffer = "Tom Hanks"

        with pytest.raises(PersistenceError):
            controller.on_add()

        assert controller.input_buffer == "Tom Hanks"
        assert controller.working_list == []


# ============================================================================
# on_confirm / on_cancel
# ============================================================================


class TestOnConfirm:
    """Tests pour l'action 'OK'."""

    def test_links_staged_actors(self, dialog, session, catalog, on_close):
        """Les acteurs de la liste sont associes au film et le dialogue se ferme."""
        inception = catalog.movies["Inception"]
        for name in ("Margot Robbie", "Tom Hanks"):
            dialog.input_buffer = name
            dialog.on_add()

        linked = dialog.on_confirm()

        margot = catalog.actors["Margot Robbie"]
        assert margot in linked
        assert len(linked) == 2
        assert _links_for(session, inception, margot) == 1
        assert not dialog.is_open
        on_close.assert_called_once()

    def test_never_duplicates_existing_association(self, dialog, session, catalog):
        """Un acteur deja associe n'est pas re-insere."""
        inception = catalog.movies["Inception"]
        leo = catalog.actors["Leonardo Di Caprio"]
        dialog.input_buffer = "Leonardo Di Caprio"
        dialog.on_add()

        linked = dialog.on_confirm()

        assert linked == []
        assert _links_for(session, inception, leo) == 1

    def test_refreshes_current_movie_actor_ids(self, dialog, catalog):
        """Le film courant reflete les associations apres confirmation."""
        dialog.input_buffer = "Christoph Waltz"
        dialog.on_add()

        dialog.on_confirm()

        assert set(dialog.current_movie.actor_ids) == {
            catalog.actors["Leonardo Di Caprio"],
            catalog.actors["Christoph Waltz"],
        }

    def test_persistence_error_keeps_dialog_open(self, mock_actor_dao, mock_movie_dao):
        """Une erreur d'association remonte et le dialogue reste ouvert."""
        on_close = MagicMock()
        mock_movie_dao.add_actors_to_movie.side_effect = PersistenceError("locked")
        controller = ActorDialogController(mock_actor_dao, mock_movie_dao, on_close=on_close)
        controller.set_current_movie(Movie(id=1, title="Inception", release_year=2010))
        controller.working_list.append(Actor(id=3, name="Jamie Foxx"))

        with pytest.raises(PersistenceError):
            controller.on_confirm()

        assert controller.is_open
        assert controller.working_list == [Actor(id=3, name="Jamie Foxx")]
        on_close.assert_not_called()

    def test_requires_saved_movie(self, mock_actor_dao, mock_movie_dao):
        """Sans film enregistre, la confirmation leve ValidationError."""
        controller = ActorDialogController(mock_actor_dao, mock_movie_dao)

        with pytest.raises(ValidationError):
            controller.on_confirm()

        controller.set_current_movie(Movie(title="Unsaved", release_year=2024))
        with pytest.raises(ValidationError):
            controller.on_confirm()
        mock_movie_dao.add_actors_to_movie.assert_not_called()

    def test_empty_working_list_closes_without_writes(self, mock_actor_dao, mock_movie_dao):
        """Confirmer une liste vide ferme le dialogue sans ecriture."""
        controller = ActorDialogController(mock_actor_dao, mock_movie_dao)
        controller.set_current_movie(Movie(id=1, title="Inception", release_year=2010))

        assert controller.on_confirm() == []
        assert not controller.is_open
        mock_movie_dao.add_actors_to_movie.assert_not_called()


class TestOnCancel:
    """Tests pour l'action 'Annuler'."""

    def test_cancel_persists_nothing(self, dialog, session, catalog, on_close):
        """Annuler vide la liste, ferme le dialogue et n'associe rien."""
        inception = catalog.movies["Inception"]
        dialog.input_buffer = "Meryl Streep"
        dialog.on_add()
        dialog.input_buffer = "draft"

        dialog.on_cancel()

        assert dialog.working_list == []
        assert dialog.input_buffer == ""
        assert not dialog.is_open
        on_close.assert_called_once()
        assert _links_for(session, inception, catalog.actors["Meryl Streep"]) == 0


# ============================================================================
# Suggestions
# ============================================================================


class TestSuggestions:
    """Tests pour on_suggest et on_completion_selected."""

    def test_short_prefix_returns_nothing(self, mock_actor_dao, mock_movie_dao):
        """Moins de 3 caracteres : aucune recherche."""
        controller = ActorDialogController(mock_actor_dao, mock_movie_dao)

        assert controller.on_suggest("Le") == []
        mock_actor_dao.find_actors_by_starting_name.assert_not_called()

    def test_prefix_lookup(self, dialog):
        """A partir de 3 caracteres, les noms correspondants sont proposes."""
        assert dialog.on_suggest("Leo") == ["Leonardo Di Caprio"]

    def test_min_chars_configurable(self, mock_actor_dao, mock_movie_dao):
        """Le seuil de suggestion est configurable."""
        mock_actor_dao.find_actors_by_starting_name.return_value = ["Meryl Streep"]
        controller = ActorDialogController(
            mock_actor_dao, mock_movie_dao, suggestion_min_chars=1
        )

        assert controller.on_suggest("M") == ["Meryl Streep"]

    def test_completion_replaces_input(self, dialog):
        """Choisir une suggestion remplace le texte saisi."""
        dialog.input_buffer = "Leo"

        dialog.on_completion_selected("Leonardo Di Caprio")

        assert dialog.input_buffer == "Leonardo Di Caprio"
