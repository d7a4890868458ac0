"""
Point d'entrée CLI de MovieDB.

Sous-commandes : movie, actor, genre (catalogue), cast (dialogue d'ajout
d'acteurs), info et version.
"""

from typing import Annotated

import typer
from loguru import logger
from rich.markup import escape
from rich.table import Table

from . import __version__
from .adapters.cli.commands import actor_app, cast, genre_app, movie_app
from .adapters.cli.helpers import console, report_errors, with_container
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="moviedb",
    help="Catalogue de films, d'acteurs et de genres",
    no_args_is_help=True,
)

app.add_typer(movie_app, name="movie")
app.add_typer(actor_app, name="actor")
app.add_typer(genre_app, name="genre")
app.command()(cast)


@app.callback()
def main_callback(
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Aucun log loguru pendant la commande"),
    ] = False,
) -> None:
    """MovieDB - Catalogue personnel de films."""
    if quiet:
        logger.disable("moviedb")


@app.command()
def info() -> None:
    """Affiche la configuration et le contenu du catalogue."""
    _info()


@with_container
def _info(container) -> None:
    config = container.config()
    with report_errors():
        movies = container.movie_dao().list_all()
        genres = container.genre_dao().list_all()

    table = Table(title="MovieDB", show_header=False)
    table.add_column("Clé", style="cyan")
    table.add_column("Valeur")
    table.add_row("Base de données", escape(config.database_url))
    table.add_row("Films", str(len(movies)))
    table.add_row("Genres", str(len(genres)))
    table.add_row(
        "Suggestions",
        f"{config.suggestion_min_chars} caractères, délai {config.suggestion_debounce_ms} ms",
    )
    table.add_row("Log", escape(f"{config.log_level} -> {config.log_file}"))
    console.print(table)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieDB v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    container = Container()
    settings = container.config()
    configure_logging(settings)

    # Cree les tables manquantes avant toute commande
    container.database.init()

    logger.info("Démarrage de MovieDB", version=__version__, database_url=settings.database_url)

    app()


if __name__ == "__main__":
    main()
