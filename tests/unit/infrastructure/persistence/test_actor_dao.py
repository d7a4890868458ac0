"""Tests pour SQLModelActorDao et SQLModelGenreDao."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from moviedb.core.entities.media import Actor, Genre
from moviedb.core.exceptions import PersistenceError, ValidationError
from moviedb.infrastructure.persistence.dao import SQLModelActorDao, SQLModelGenreDao


def _broken_session() -> MagicMock:
    """Session dont toutes les requetes echouent comme une base inaccessible."""
    error = OperationalError("SELECT", {}, Exception("unable to open database file"))
    session = MagicMock()
    session.exec.side_effect = error
    session.get.side_effect = error
    return session


class TestActorDao:
    """Tests pour le DAO des acteurs."""

    def test_create_and_read(self, session):
        """create retourne l'ID genere, read retrouve l'acteur."""
        dao = SQLModelActorDao(session)
        actor = Actor(name="Tom Hanks")

        actor_id = dao.create(actor)

        assert actor.id == actor_id
        assert dao.read(actor_id) == Actor(id=actor_id, name="Tom Hanks")

    def test_create_strips_name(self, session):
        """Les espaces autour du nom sont supprimes."""
        dao = SQLModelActorDao(session)
        actor_id = dao.create(Actor(name="  Tom Hanks  "))

        assert dao.read(actor_id).name == "Tom Hanks"

    def test_create_empty_name_raises(self, session):
        """Un nom vide leve ValidationError."""
        with pytest.raises(ValidationError):
            SQLModelActorDao(session).create(Actor(name=" "))

    def test_create_without_generated_key_raises(self, session, monkeypatch):
        """Sans ID genere, create leve PersistenceError et l'acteur n'est pas enregistre."""
        dao = SQLModelActorDao(session)
        actor = Actor(name="Tom Hanks")
        monkeypatch.setattr(session, "flush", lambda *args, **kwargs: None)

        with pytest.raises(PersistenceError, match="aucun ID genere"):
            dao.create(actor)

        assert actor.id is None
        assert dao.get_actor_by_name("Tom Hanks") is None

    def test_read_unknown_returns_none(self, session, catalog):
        """read retourne None pour un ID inexistant."""
        assert SQLModelActorDao(session).read(404) is None

    def test_read_database_error_raises_persistence_error(self):
        """Une erreur du driver en lecture devient PersistenceError."""
        dao = SQLModelActorDao(_broken_session())

        with pytest.raises(PersistenceError) as exc_info:
            dao.read(1)

        assert "unable to open database file" in str(exc_info.value)

    def test_get_actor_by_name_exact_match(self, session, catalog):
        """get_actor_by_name retrouve un acteur par son nom exact."""
        actor = SQLModelActorDao(session).get_actor_by_name("Meryl Streep")

        assert actor == Actor(id=catalog.actors["Meryl Streep"], name="Meryl Streep")

    def test_get_actor_by_name_is_case_sensitive(self, session, catalog):
        """La comparaison respecte la casse."""
        dao = SQLModelActorDao(session)

        assert dao.get_actor_by_name("meryl streep") is None
        assert dao.get_actor_by_name("Meryl") is None

    def test_find_actors_by_starting_name(self, session, catalog):
        """Le prefixe 'Le' retourne Leonardo Di Caprio et pas Meryl Streep."""
        names = SQLModelActorDao(session).find_actors_by_starting_name("Le")

        assert "Leonardo Di Caprio" in names
        assert "Meryl Streep" not in names

    def test_find_actors_sorted_by_name(self, session, catalog):
        """Les suggestions sont triees par nom."""
        dao = SQLModelActorDao(session)
        dao.create(Actor(name="Robin Williams"))

        assert dao.find_actors_by_starting_name("Ro") == ["Robert De Niro", "Robin Williams"]

    def test_find_actors_escapes_wildcards(self, session, catalog):
        """Les caracteres % et _ du prefixe sont pris litteralement."""
        dao = SQLModelActorDao(session)

        assert dao.find_actors_by_starting_name("%") == []
        assert dao.find_actors_by_starting_name("_eryl") == []

    def test_find_actors_blank_prefix(self, session, catalog):
        """Un prefixe vide ne retourne rien."""
        assert SQLModelActorDao(session).find_actors_by_starting_name("") == []
        assert SQLModelActorDao(session).find_actors_by_starting_name("  ") == []

    def test_find_actors_no_match(self, session, catalog):
        """Aucun acteur ne correspond : liste vide."""
        assert SQLModelActorDao(session).find_actors_by_starting_name("Zz") == []

    def test_find_actors_degrades_on_database_error(self):
        """Une erreur de la base donne une liste vide au lieu d'une exception."""
        dao = SQLModelActorDao(_broken_session())

        assert dao.find_actors_by_starting_name("Leo") == []


class TestGenreDao:
    """Tests pour le DAO des genres."""

    def test_create_and_read(self, session):
        """create retourne l'ID genere, read retrouve le genre."""
        dao = SQLModelGenreDao(session)

        genre_id = dao.create(Genre(name="Western"))

        assert dao.read(genre_id) == Genre(id=genre_id, name="Western")

    def test_create_empty_name_raises(self, session):
        """Un nom vide leve ValidationError."""
        with pytest.raises(ValidationError):
            SQLModelGenreDao(session).create(Genre(name=""))

    def test_create_without_generated_key_raises(self, session, monkeypatch):
        """Sans ID genere, create leve PersistenceError et le genre n'est pas enregistre."""
        dao = SQLModelGenreDao(session)
        genre = Genre(name="Western")
        monkeypatch.setattr(session, "flush", lambda *args, **kwargs: None)

        with pytest.raises(PersistenceError, match="aucun ID genere"):
            dao.create(genre)

        assert genre.id is None
        assert dao.get_genre_by_name("Western") is None

    def test_get_genre_by_name(self, session, catalog):
        """get_genre_by_name retrouve un genre existant, None sinon."""
        dao = SQLModelGenreDao(session)

        assert dao.get_genre_by_name("Drama").id == catalog.genres["Drama"]
        assert dao.get_genre_by_name("Horror") is None

    def test_list_all_sorted(self, session, catalog):
        """list_all retourne les genres tries par nom."""
        names = [genre.name for genre in SQLModelGenreDao(session).list_all()]

        assert names == ["Action", "Adventure", "Comedy", "Crime", "Drama", "Fantasy"]
