"""
Couche application : cas d'utilisation au-dessus des DAOs.

- actor_dialog : controleur du dialogue d'ajout d'acteurs a un film
- suggestions : suggestions asynchrones de noms d'acteurs
"""

from moviedb.services.actor_dialog import ActorDialogController, AddOutcome
from moviedb.services.suggestions import SuggestionFeed, make_actor_lookup

__all__ = [
    "ActorDialogController",
    "AddOutcome",
    "SuggestionFeed",
    "make_actor_lookup",
]
