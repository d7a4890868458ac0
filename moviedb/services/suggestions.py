"""
Flux de suggestions de noms d'acteurs pendant la saisie.

La recherche s'execute hors de la boucle d'evenements (asyncio.to_thread),
apres un delai anti-rebond. Chaque nouvelle saisie annule la recherche en
attente : une requete remplacee retourne None et ne publie jamais de
suggestions perimees.

Chaque recherche ouvre sa propre session : la session partagee du
dialogue n'est jamais utilisee depuis un autre thread.
"""

import asyncio
from typing import Callable, Optional

from loguru import logger
from sqlmodel import Session

from moviedb.infrastructure.persistence.dao.actor_dao import SQLModelActorDao

Lookup = Callable[[str], list[str]]


def make_actor_lookup(session_factory: Callable[[], Session]) -> Lookup:
    """
    Construit une fonction de recherche par prefixe avec une session par appel.

    Args:
        session_factory: Fabrique de sessions (ex: lambda: Session(get_engine()))

    Returns:
        Fonction prefix -> noms d'acteurs
    """

    def lookup(prefix: str) -> list[str]:
        with session_factory() as session:
            return SQLModelActorDao(session).find_actors_by_starting_name(prefix)

    return lookup


class SuggestionFeed:
    """
    Suggestions asynchrones avec anti-rebond et annulation des requetes remplacees.

    Usage:
        feed = SuggestionFeed(lookup, min_chars=3, debounce_seconds=0.25)
        names = await feed.request("Leo")  # None si remplacee entre-temps
    """

    def __init__(
        self,
        lookup: Lookup,
        min_chars: int = 3,
        debounce_seconds: float = 0.25,
    ) -> None:
        self._lookup = lookup
        self._min_chars = min_chars
        self._debounce_seconds = debounce_seconds
        self._pending: Optional[asyncio.Task] = None
        self._generation = 0

    async def request(self, text: str) -> Optional[list[str]]:
        """
        Demande les suggestions pour le texte saisi.

        Returns:
            Les noms suggeres, [] si le texte est trop court ou si la recherche
            echoue, None si une saisie plus recente a remplace cette requete
        """
        self.cancel()
        generation = self._generation

        task = asyncio.create_task(self._run(text))
        self._pending = task
        try:
            result = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                return None
            raise
        finally:
            if self._pending is task:
                self._pending = None

        if generation != self._generation:
            return None
        return result

    def cancel(self) -> None:
        """Annule la recherche en attente : la requete correspondante retourne None."""
        self._generation += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()

    async def _run(self, text: str) -> list[str]:
        if len(text) < self._min_chars:
            return []
        if self._debounce_seconds > 0:
            await asyncio.sleep(self._debounce_seconds)
        try:
            return await asyncio.to_thread(self._lookup, text)
        except Exception as exc:
            logger.warning("Recherche de suggestions en echec", prefix=text, error=str(exc))
            return []
