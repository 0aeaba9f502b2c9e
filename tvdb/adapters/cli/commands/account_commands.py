"""Commandes CLI liees au compte utilisateur : favoris, notes, langue."""

from typing import Annotated, Optional

import typer

from tvdb.adapters.cli.display import display_ratings
from tvdb.adapters.cli.helpers import console, open_client, resolve_account

_ACCOUNT_HELP = "Identifiant de compte TVDB (defaut: TVDB_ACCOUNT_ID)"


def favorites(
    account: Annotated[
        Optional[str], typer.Option("--account", help=_ACCOUNT_HELP)
    ] = None,
    add: Annotated[
        Optional[int], typer.Option("--add", help="Ajouter une serie aux favoris")
    ] = None,
    remove: Annotated[
        Optional[int], typer.Option("--remove", help="Retirer une serie des favoris")
    ] = None,
) -> None:
    """Liste (ou modifie) les series favorites d'un utilisateur."""
    if add is not None and remove is not None:
        console.print("[red]Erreur: --add et --remove sont exclusifs[/red]")
        raise typer.Exit(1)

    account_id = resolve_account(account)
    with open_client() as client:
        if add is not None:
            series_ids = client.add_user_favorite(account_id, add)
        elif remove is not None:
            series_ids = client.remove_user_favorite(account_id, remove)
        else:
            series_ids = client.user_favorites(account_id)

    if not series_ids:
        console.print("[yellow]Aucun favori[/yellow]")
    for series_id in series_ids:
        console.print(str(series_id))


def ratings(
    account: Annotated[
        Optional[str], typer.Option("--account", help=_ACCOUNT_HELP)
    ] = None,
    series_id: Annotated[
        Optional[int],
        typer.Option("--series", "-s", help="Notes d'une serie et de ses episodes"),
    ] = None,
) -> None:
    """Affiche les notes d'un utilisateur."""
    account_id = resolve_account(account)
    with open_client() as client:
        if series_id is None:
            display_ratings(client.user_ratings(account_id), title="Series")
            return
        series_rating, episode_ratings = client.user_ratings_for_series(
            account_id, series_id
        )
    display_ratings([series_rating], title="Serie")
    display_ratings(episode_ratings, title="Episodes")


def rate(
    item_id: Annotated[int, typer.Argument(help="ID de la serie (ou de l'episode)")],
    rating: Annotated[int, typer.Argument(help="Note de 0 a 10")],
    episode: Annotated[
        bool, typer.Option("--episode", "-e", help="Noter un episode")
    ] = False,
    account: Annotated[
        Optional[str], typer.Option("--account", help=_ACCOUNT_HELP)
    ] = None,
) -> None:
    """Enregistre la note d'un utilisateur pour une serie ou un episode."""
    account_id = resolve_account(account)
    with open_client() as client:
        if episode:
            client.set_episode_rating(account_id, item_id, rating)
        else:
            client.set_series_rating(account_id, item_id, rating)
    console.print(f"[green]Note {rating} enregistree[/green]")


def user_language(
    account: Annotated[
        Optional[str], typer.Option("--account", help=_ACCOUNT_HELP)
    ] = None,
) -> None:
    """Affiche la langue preferee d'un utilisateur."""
    account_id = resolve_account(account)
    with open_client() as client:
        language = client.user_language(account_id)
    console.print(f"{language.name} ({language.abbreviation})")
