"""
Business entities representing core domain concepts.

Exports:
- Movie: Movie with its associated actor and genre IDs
- Actor: Actor referenced by Movie.actor_ids
- Genre: Genre referenced by Movie.genre_ids
"""

from moviedb.core.entities.media import Actor, Genre, Movie

__all__ = [
    "Movie",
    "Actor",
    "Genre",
]
