"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports DAO : Contrats de persistance du catalogue
- IMovieDao : Stockage des films et de leurs associations
- IActorDao : Stockage et recherche des acteurs
- IGenreDao : Stockage des genres
- Association : Ensemble fermé des tables d'association d'un film
"""

from moviedb.core.ports.dao import (
    Association,
    IActorDao,
    IGenreDao,
    IMovieDao,
)

__all__ = [
    "Association",
    "IMovieDao",
    "IActorDao",
    "IGenreDao",
]
