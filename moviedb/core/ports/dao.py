"""
Interfaces ports pour les DAOs.

Interfaces abstraites (ports) définissant les contrats pour la persistance du catalogue.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel).

Toute erreur du driver remonte sous forme de PersistenceError ; une lecture
sans résultat retourne None.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from moviedb.core.entities.media import Actor, Genre, Movie


class Association(Enum):
    """
    Tables d'association d'un film.

    Ensemble fermé : seules ces deux tables peuvent être lues par
    IMovieDao.fetch_associated_ids.
    """

    ACTORS = "movie_actors"
    GENRES = "movie_genres"


class IMovieDao(ABC):
    """
    Interface de stockage des films et de leurs associations.

    Définit les opérations CRUD sur Movie ainsi que la maintenance des
    tables movie_actors et movie_genres.
    """

    @abstractmethod
    def create(self, movie: Movie) -> int:
        """Insère un film et ses associations. Retourne l'ID généré."""
        ...

    @abstractmethod
    def read(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID, avec ses IDs d'acteurs et de genres."""
        ...

    @abstractmethod
    def update(self, movie: Movie) -> bool:
        """Met à jour un film et remplace toutes ses associations. False si absent."""
        ...

    @abstractmethod
    def delete(self, movie: Movie) -> bool:
        """Supprime un film et ses associations. Retourne True si supprimé."""
        ...

    @abstractmethod
    def list_all(self) -> list[Movie]:
        """Liste tous les films, triés par titre."""
        ...

    @abstractmethod
    def fetch_associated_ids(self, movie_id: int, association: Association) -> list[int]:
        """Liste les IDs associés à un film dans la table d'association donnée."""
        ...

    @abstractmethod
    def add_actor_to_movie(self, actor_id: int, movie_id: int) -> bool:
        """Associe un acteur à un film. False si l'association existait déjà."""
        ...

    @abstractmethod
    def add_actors_to_movie(self, movie_id: int, actor_ids: list[int]) -> list[int]:
        """Associe plusieurs acteurs à un film. Retourne les IDs réellement ajoutés."""
        ...

    @abstractmethod
    def add_genre_to_movie(self, genre_id: int, movie_id: int) -> bool:
        """Associe un genre à un film. False si l'association existait déjà."""
        ...


class IActorDao(ABC):
    """
    Interface de stockage des acteurs.

    Définit les opérations pour persister et rechercher les entités Actor.
    """

    @abstractmethod
    def create(self, actor: Actor) -> int:
        """Insère un acteur. Retourne l'ID généré."""
        ...

    @abstractmethod
    def read(self, actor_id: int) -> Optional[Actor]:
        """Récupère un acteur par son ID."""
        ...

    @abstractmethod
    def get_actor_by_name(self, name: str) -> Optional[Actor]:
        """Récupère un acteur par son nom exact (sensible à la casse)."""
        ...

    @abstractmethod
    def find_actors_by_starting_name(self, prefix: str) -> list[str]:
        """
        Liste les noms d'acteurs commençant par un préfixe.

        Alimente les suggestions de saisie : retourne une liste vide
        en cas d'erreur plutôt que de lever une exception.
        """
        ...


class IGenreDao(ABC):
    """
    Interface de stockage des genres.

    Définit les opérations pour persister et récupérer les entités Genre.
    """

    @abstractmethod
    def create(self, genre: Genre) -> int:
        """Insère un genre. Retourne l'ID généré."""
        ...

    @abstractmethod
    def read(self, genre_id: int) -> Optional[Genre]:
        """Récupère un genre par son ID."""
        ...

    @abstractmethod
    def get_genre_by_name(self, name: str) -> Optional[Genre]:
        """Récupère un genre par son nom exact."""
        ...

    @abstractmethod
    def list_all(self) -> list[Genre]:
        """Liste tous les genres, triés par nom."""
        ...
