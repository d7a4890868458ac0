"""
Commande CLI cast : dialogue interactif d'ajout d'acteurs a un film.

Saisies reconnues :
- un nom : ajoute l'acteur a la liste (cree en base s'il n'existe pas)
- ?debut : affiche les suggestions de noms
- :ok : associe les acteurs de la liste au film et ferme le dialogue
- :cancel : ferme le dialogue sans rien enregistrer
"""

import asyncio
from typing import Annotated

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from moviedb.adapters.cli.helpers import console, report_errors, suppress_loguru, with_container
from moviedb.core.exceptions import PersistenceError, ValidationError
from moviedb.services.actor_dialog import ActorDialogController, AddOutcome
from moviedb.services.suggestions import SuggestionFeed

CONFIRM_COMMAND = ":ok"
CANCEL_COMMAND = ":cancel"
SUGGEST_PREFIX = "?"


def cast(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
) -> None:
    """
    Ajoute des acteurs a un film de maniere interactive.

    Exemples:
      moviedb cast 3
      > Jamie Foxx
      > ?Chr
      > Christoph Waltz
      > :ok
    """
    _cast(movie_id)


@with_container
def _cast(container, movie_id: int) -> None:
    dialog = container.actor_dialog()
    feed = container.suggestion_feed()

    with report_errors():
        movie = container.movie_dao().read(movie_id)
    if movie is None:
        console.print(f"[yellow]Film introuvable : {movie_id}[/yellow]")
        raise typer.Exit(1)

    dialog.set_current_movie(movie)
    console.print(
        Panel(
            f"Acteurs pour [bold]{escape(movie.title)}[/bold] ({movie.release_year})\n"
            f"[dim]{CONFIRM_COMMAND} valider, {CANCEL_COMMAND} annuler, "
            f"{SUGGEST_PREFIX}debut suggestions[/dim]",
            border_style="cyan",
        )
    )

    with suppress_loguru():
        run_dialog_loop(dialog, feed)


def _render_working_list(dialog: ActorDialogController) -> None:
    if not dialog.working_list:
        console.print("[dim]Liste vide.[/dim]")
        return
    names = escape(", ".join(actor.name for actor in dialog.working_list))
    console.print(f"[cyan]Liste[/cyan] : {names}")


def run_dialog_loop(dialog: ActorDialogController, feed: SuggestionFeed) -> None:
    """
    Boucle interactive du dialogue, jusqu'a confirmation ou annulation.

    Une fin de saisie (EOF / Ctrl-D) equivaut a une annulation.
    """
    while dialog.is_open:
        try:
            text = Prompt.ask("Acteur", console=console)
        except (EOFError, KeyboardInterrupt):
            dialog.on_cancel()
            console.print("[dim]Dialogue annule.[/dim]")
            break

        command = text.strip()
        if command == CANCEL_COMMAND:
            dialog.on_cancel()
            console.print("[dim]Dialogue annule.[/dim]")
        elif command == CONFIRM_COMMAND:
            try:
                linked = dialog.on_confirm()
            except (ValidationError, PersistenceError) as exc:
                console.print(f"[red]Erreur: {escape(str(exc))}[/red]")
                continue
            console.print(f"[green]{len(linked)} acteur(s) associe(s)[/green]")
        elif command.startswith(SUGGEST_PREFIX):
            names = asyncio.run(feed.request(command[len(SUGGEST_PREFIX):]))
            if names:
                for name in names:
                    console.print(f"  {escape(name)}")
            else:
                console.print("[dim]Aucune suggestion.[/dim]")
        else:
            dialog.input_buffer = text
            try:
                outcome = dialog.on_add()
            except (ValidationError, PersistenceError) as exc:
                console.print(f"[red]Erreur: {escape(str(exc))}[/red]")
                continue
            if outcome is AddOutcome.ALREADY_STAGED:
                console.print("[yellow]Acteur deja dans la liste.[/yellow]")
            elif outcome is AddOutcome.CREATED:
                console.print("[green]Nouvel acteur cree.[/green]")
            _render_working_list(dialog)
