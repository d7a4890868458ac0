"""
Commandes CLI du catalogue (movie, actor, genre).
"""

from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from moviedb.adapters.cli.helpers import console, report_errors, with_container
from moviedb.core.entities.media import Actor, Genre, Movie

movie_app = typer.Typer(help="Gestion des films")
actor_app = typer.Typer(help="Gestion des acteurs")
genre_app = typer.Typer(help="Gestion des genres")


def _render_movie(container, movie: Movie) -> Table:
    """Construit la fiche d'un film avec les noms de ses acteurs et genres."""
    actor_dao = container.actor_dao()
    genre_dao = container.genre_dao()

    actors = [actor_dao.read(actor_id) for actor_id in movie.actor_ids]
    genres = [genre_dao.read(genre_id) for genre_id in movie.genre_ids]

    table = Table(title=f"{escape(movie.title)} ({movie.release_year})", show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    table.add_row("ID", str(movie.id))
    table.add_row("Realisateur", escape(movie.director) or "-")
    table.add_row("Acteurs", escape(", ".join(a.name for a in actors if a)) or "-")
    table.add_row("Genres", escape(", ".join(g.name for g in genres if g)) or "-")
    return table


# ============================================================================
# movie
# ============================================================================


@movie_app.command("add")
def movie_add(
    title: Annotated[str, typer.Argument(help="Titre du film")],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de sortie")],
    director: Annotated[str, typer.Option("--director", "-d", help="Realisateur")] = "",
    actor: Annotated[
        Optional[list[int]], typer.Option("--actor", "-a", help="ID d'acteur (repetable)")
    ] = None,
    genre: Annotated[
        Optional[list[int]], typer.Option("--genre", "-g", help="ID de genre (repetable)")
    ] = None,
) -> None:
    """Ajoute un film avec ses acteurs et genres."""
    _movie_add(title, year, director, actor or [], genre or [])


@with_container
def _movie_add(
    container, title: str, year: int, director: str, actor_ids: list[int], genre_ids: list[int]
) -> None:
    movie = Movie(
        title=title,
        release_year=year,
        director=director,
        actor_ids=actor_ids,
        genre_ids=genre_ids,
    )
    with report_errors():
        movie_id = container.movie_dao().create(movie)
    console.print(f"[green]Film cree[/green] : {escape(movie.title)} (ID {movie_id})")


@movie_app.command("show")
def movie_show(movie_id: Annotated[int, typer.Argument(help="ID du film")]) -> None:
    """Affiche un film."""
    _movie_show(movie_id)


@with_container
def _movie_show(container, movie_id: int) -> None:
    with report_errors():
        movie = container.movie_dao().read(movie_id)
        if movie is None:
            console.print(f"[yellow]Film introuvable : {movie_id}[/yellow]")
            raise typer.Exit(1)
        console.print(_render_movie(container, movie))


@movie_app.command("list")
def movie_list() -> None:
    """Liste les films du catalogue."""
    _movie_list()


@with_container
def _movie_list(container) -> None:
    with report_errors():
        movies = container.movie_dao().list_all()

    if not movies:
        console.print("[dim]Aucun film.[/dim]")
        return

    table = Table(title="Films")
    table.add_column("ID", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Realisateur")
    table.add_column("Acteurs", justify="right")
    table.add_column("Genres", justify="right")
    for movie in movies:
        table.add_row(
            str(movie.id),
            escape(movie.title),
            str(movie.release_year),
            escape(movie.director),
            str(len(movie.actor_ids)),
            str(len(movie.genre_ids)),
        )
    console.print(table)


@movie_app.command("update")
def movie_update(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y")] = None,
    director: Annotated[Optional[str], typer.Option("--director", "-d")] = None,
    actor: Annotated[
        Optional[list[int]],
        typer.Option("--actor", "-a", help="Remplace la liste des acteurs (repetable)"),
    ] = None,
    genre: Annotated[
        Optional[list[int]],
        typer.Option("--genre", "-g", help="Remplace la liste des genres (repetable)"),
    ] = None,
) -> None:
    """
    Met a jour un film.

    Les options non fournies conservent la valeur actuelle. --actor et --genre
    remplacent entierement la liste correspondante.
    """
    _movie_update(movie_id, title, year, director, actor, genre)


@with_container
def _movie_update(
    container,
    movie_id: int,
    title: Optional[str],
    year: Optional[int],
    director: Optional[str],
    actor_ids: Optional[list[int]],
    genre_ids: Optional[list[int]],
) -> None:
    movie_dao = container.movie_dao()
    with report_errors():
        movie = movie_dao.read(movie_id)
        if movie is None:
            console.print(f"[yellow]Film introuvable : {movie_id}[/yellow]")
            raise typer.Exit(1)

        if title is not None:
            movie.title = title
        if year is not None:
            movie.release_year = year
        if director is not None:
            movie.director = director
        if actor_ids is not None:
            movie.actor_ids = actor_ids
        if genre_ids is not None:
            movie.genre_ids = genre_ids

        if not movie_dao.update(movie):
            console.print(f"[yellow]Film introuvable : {movie_id}[/yellow]")
            raise typer.Exit(1)
    console.print(f"[green]Film mis a jour[/green] : {escape(movie.title)} (ID {movie_id})")


@movie_app.command("delete")
def movie_delete(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    yes: Annotated[bool, typer.Option("--yes", help="Ne pas demander de confirmation")] = False,
) -> None:
    """Supprime un film et ses associations."""
    _movie_delete(movie_id, yes)


@with_container
def _movie_delete(container, movie_id: int, yes: bool) -> None:
    movie_dao = container.movie_dao()
    with report_errors():
        movie = movie_dao.read(movie_id)
        if movie is None:
            console.print(f"[yellow]Film introuvable : {movie_id}[/yellow]")
            raise typer.Exit(1)
        if not yes and not Confirm.ask(f"Supprimer '{escape(movie.title)}' ?", console=console):
            console.print("[dim]Suppression annulee.[/dim]")
            return
        movie_dao.delete(movie)
    console.print(f"[green]Film supprime[/green] : {escape(movie.title)}")


# ============================================================================
# actor
# ============================================================================


@actor_app.command("add")
def actor_add(name: Annotated[str, typer.Argument(help="Nom de l'acteur")]) -> None:
    """Ajoute un acteur (ou affiche l'existant s'il porte deja ce nom)."""
    _actor_add(name)


@with_container
def _actor_add(container, name: str) -> None:
    actor_dao = container.actor_dao()
    with report_errors():
        existing = actor_dao.get_actor_by_name(name.strip())
        if existing is not None:
            console.print(f"[yellow]Acteur existant[/yellow] : {escape(existing.name)} (ID {existing.id})")
            return
        actor_id = actor_dao.create(Actor(name=name))
    console.print(f"[green]Acteur cree[/green] : {escape(name.strip())} (ID {actor_id})")


@actor_app.command("find")
def actor_find(prefix: Annotated[str, typer.Argument(help="Debut du nom")]) -> None:
    """Liste les acteurs dont le nom commence par PREFIX."""
    _actor_find(prefix)


@with_container
def _actor_find(container, prefix: str) -> None:
    names = container.actor_dao().find_actors_by_starting_name(prefix)
    if not names:
        console.print("[dim]Aucun acteur trouve.[/dim]")
        return
    for name in names:
        console.print(f"  {escape(name)}")


# ============================================================================
# genre
# ============================================================================


@genre_app.command("add")
def genre_add(name: Annotated[str, typer.Argument(help="Nom du genre")]) -> None:
    """Ajoute un genre (ou affiche l'existant s'il porte deja ce nom)."""
    _genre_add(name)


@with_container
def _genre_add(container, name: str) -> None:
    genre_dao = container.genre_dao()
    with report_errors():
        existing = genre_dao.get_genre_by_name(name.strip())
        if existing is not None:
            console.print(f"[yellow]Genre existant[/yellow] : {escape(existing.name)} (ID {existing.id})")
            return
        genre_id = genre_dao.create(Genre(name=name))
    console.print(f"[green]Genre cree[/green] : {escape(name.strip())} (ID {genre_id})")


@genre_app.command("list")
def genre_list() -> None:
    """Liste les genres."""
    _genre_list()


@with_container
def _genre_list(container) -> None:
    with report_errors():
        genres = container.genre_dao().list_all()
    if not genres:
        console.print("[dim]Aucun genre.[/dim]")
        return
    for genre in genres:
        console.print(f"  {genre.id:>4}  {escape(genre.name)}")
