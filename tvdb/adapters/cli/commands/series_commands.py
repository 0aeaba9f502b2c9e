"""Commandes CLI de consultation : series, episodes, acteurs, langues."""

from typing import Annotated, Optional

import typer

from tvdb.adapters.cli.display import (
    display_actors,
    display_episode,
    display_languages,
    display_search_results,
    display_series,
)
from tvdb.adapters.cli.helpers import console, open_client
from tvdb.core.value_objects import RemoteService
from tvdb.utils.constants import ORDER_ABSOLUTE, ORDER_DEFAULT, ORDER_DVD

_ORDERS = (ORDER_DEFAULT, ORDER_DVD, ORDER_ABSOLUTE)


def search(
    name: Annotated[str, typer.Argument(help="Nom de la serie")],
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue des resultats")
    ] = None,
    scrape: Annotated[
        bool,
        typer.Option("--scrape", help="Utiliser la recherche du site (IDs seulement)"),
    ] = False,
    max_results: Annotated[
        Optional[int],
        typer.Option("--max", help="Nombre maximum de resultats avec --scrape", min=1),
    ] = None,
) -> None:
    """Recherche des series par nom."""
    with open_client() as client:
        if scrape:
            series_ids = client.scrape_search(name, max_results)
            if not series_ids:
                console.print("[yellow]Aucune serie trouvee[/yellow]")
            for series_id in series_ids:
                console.print(str(series_id))
            return
        display_search_results(client.search_series(name, language))


def series(
    series_id: Annotated[int, typer.Argument(help="ID TVDB de la serie")],
    all_episodes: Annotated[
        bool, typer.Option("--all", "-a", help="Inclure tous les episodes")
    ] = False,
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue de la fiche")
    ] = None,
) -> None:
    """Affiche la fiche d'une serie."""
    with open_client() as client:
        if all_episodes:
            record = client.series_all_by_id(series_id, language)
        else:
            record = client.series_by_id(series_id, language)
        display_series(record)


def episode(
    episode_id: Annotated[
        Optional[int], typer.Argument(help="ID TVDB de l'episode")
    ] = None,
    series_id: Annotated[
        Optional[int], typer.Option("--series", "-s", help="ID TVDB de la serie")
    ] = None,
    season: Annotated[
        Optional[int], typer.Option("--season", help="Numero de saison")
    ] = None,
    number: Annotated[
        Optional[int],
        typer.Option("--number", "-n", help="Numero d'episode (ou numero absolu)"),
    ] = None,
    order: Annotated[
        str, typer.Option("--order", help="Ordre: default, dvd ou absolute")
    ] = ORDER_DEFAULT,
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue de la fiche")
    ] = None,
) -> None:
    """Affiche un episode, par ID ou par serie/saison/numero."""
    if order not in _ORDERS:
        console.print(f"[red]Erreur: ordre inconnu '{order}' ({', '.join(_ORDERS)})[/red]")
        raise typer.Exit(1)

    if episode_id is None:
        if series_id is None or number is None:
            console.print("[red]Erreur: donner un ID d'episode ou --series et --number[/red]")
            raise typer.Exit(1)
        if order != ORDER_ABSOLUTE and season is None:
            console.print("[red]Erreur: --season est requis pour cet ordre[/red]")
            raise typer.Exit(1)

    with open_client() as client:
        if episode_id is not None:
            record = client.episode_by_id(episode_id, language)
        elif order == ORDER_ABSOLUTE:
            record = client.episode_by_absolute_order(series_id, number, language)
        elif order == ORDER_DVD:
            record = client.episode_by_dvd_order(series_id, season, number, language)
        else:
            record = client.episode_by_default_order(series_id, season, number, language)
        display_episode(record)


def actors(
    series_id: Annotated[int, typer.Argument(help="ID TVDB de la serie")],
) -> None:
    """Liste les acteurs d'une serie."""
    with open_client() as client:
        display_actors(client.actors(series_id))


def remote(
    service: Annotated[RemoteService, typer.Argument(help="Service distant")],
    remote_id: Annotated[str, typer.Argument(help="Identifiant chez ce service")],
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue de la fiche")
    ] = None,
) -> None:
    """Trouve une serie par identifiant IMDb ou Zap2it."""
    with open_client() as client:
        display_search_results([client.series_by_remote_id(service, remote_id, language)])


def languages() -> None:
    """Liste les langues supportees par TVDB."""
    with open_client() as client:
        display_languages(client.languages())
