"""Sous-package CLI commands - re-exporte les commandes publiques."""

from moviedb.adapters.cli.commands.cast_command import cast
from moviedb.adapters.cli.commands.catalog_commands import (
    actor_app,
    genre_app,
    movie_app,
)

__all__ = [
    "cast",
    "movie_app",
    "actor_app",
    "genre_app",
]
