"""
Utilitaires partages pour les commandes CLI de MovieDB.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- report_errors : context manager affichant les erreurs metier et quittant en code 1
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from moviedb.container import Container
from moviedb.core.exceptions import PersistenceError, ValidationError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("moviedb")
    try:
        yield
    finally:
        loguru_logger.enable("moviedb")


def with_container(func):
    """
    Injecte en premier argument un Container dont la base est initialisee.

    Chaque commande recoit son propre container : les settings sont relus
    depuis l'environnement a chaque invocation.

    Usage:
        @with_container
        def _movie_show(container, movie_id):
            movie = container.movie_dao().read(movie_id)
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        container.database.init()
        return func(container, *args, **kwargs)
    return wrapper


@contextmanager
def report_errors():
    """
    Affiche ValidationError et PersistenceError en rouge puis quitte en code 1.

    Usage:
        with report_errors():
            movie_dao.create(movie)
    """
    try:
        yield
    except ValidationError as exc:
        console.print(f"[red]Erreur: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    except PersistenceError as exc:
        code = f" ({exc.code})" if exc.code else ""
        console.print(f"[red]Erreur base de donnees{code}: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
