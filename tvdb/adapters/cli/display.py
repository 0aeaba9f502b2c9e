"""
Affichage Rich des entites TVDB.

Fonctions de rendu utilisees par les commandes CLI. Aucune ne fait
d'appel reseau.
"""

from typing import Iterable

from rich.panel import Panel
from rich.table import Table

from tvdb.adapters.cli.helpers import console
from tvdb.core.entities import (
    Actor,
    Episode,
    Language,
    Rating,
    Series,
    SeriesSummary,
)


def _year(series: SeriesSummary | Series) -> str:
    return str(series.first_aired.year) if series.first_aired else "?"


def display_search_results(results: list[SeriesSummary]) -> None:
    """Affiche les resultats d'une recherche de series."""
    if not results:
        console.print("[yellow]Aucune serie trouvee[/yellow]")
        return

    table = Table(title=f"{len(results)} serie(s)")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Nom", style="bold")
    table.add_column("Annee")
    table.add_column("Reseau")
    table.add_column("Alias")
    for series in results:
        table.add_row(
            str(series.id),
            series.name,
            _year(series),
            series.network,
            ", ".join(series.aliases),
        )
    console.print(table)


def display_series(series: Series) -> None:
    """Affiche la fiche d'une serie, et ses saisons si elles sont chargees."""
    lines = [
        f"[bold]{series.name}[/bold] ({_year(series)}) - {series.status or '?'}",
        f"Reseau : {series.network or '?'}  |  Diffusion : "
        f"{series.airs_day_of_week} {series.airs_time}".rstrip(),
        f"Genres : {', '.join(series.genres) or '-'}",
        f"Note : {str(series.rating) or '-'} ({str(series.rating_count) or 0} votes)",
    ]
    if series.runtime.valid:
        lines.append(f"Duree : {series.runtime.value} min")
    if series.imdb_id:
        lines.append(f"IMDb : {series.imdb_id}")
    if series.overview:
        lines.append("")
        lines.append(series.overview)
    console.print(Panel("\n".join(lines), title=f"Serie {series.id}"))

    if series.seasons:
        display_episodes(series.episodes)


def display_episodes(episodes: Iterable[Episode]) -> None:
    """Affiche une liste d'episodes."""
    table = Table()
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Episode")
    table.add_column("Titre", style="bold")
    table.add_column("Diffusion")
    table.add_column("Note", justify="right")
    for episode in episodes:
        table.add_row(
            str(episode.id),
            f"S{episode.season_number:02d}E{episode.episode_number:02d}",
            episode.name,
            episode.first_aired.isoformat() if episode.first_aired else "",
            str(episode.rating),
        )
    console.print(table)


def display_episode(episode: Episode) -> None:
    """Affiche le detail d'un episode."""
    lines = [
        f"[bold]{episode.name}[/bold]",
        f"S{episode.season_number:02d}E{episode.episode_number:02d}"
        f"  |  DVD : {str(episode.dvd_season) or '-'}x{episode.dvd_episode_number or '-'}"
        f"  |  Absolu : {str(episode.absolute_number) or '-'}",
        f"Diffusion : {episode.first_aired.isoformat() if episode.first_aired else '?'}",
        f"Realisation : {', '.join(episode.directors) or '-'}",
        f"Scenario : {', '.join(episode.writers) or '-'}",
    ]
    if episode.guest_stars:
        lines.append(f"Invites : {', '.join(episode.guest_stars)}")
    if episode.image_flag.valid:
        lines.append(f"Vignette : {episode.image_flag.name}")
    if episode.overview:
        lines.append("")
        lines.append(episode.overview)
    console.print(Panel("\n".join(lines), title=f"Episode {episode.id}"))


def display_actors(actors: list[Actor]) -> None:
    """Affiche les acteurs d'une serie par ordre d'apparition au generique."""
    table = Table()
    table.add_column("Nom", style="bold")
    table.add_column("Role(s)")
    for actor in sorted(actors, key=lambda a: a.sort_order):
        table.add_row(actor.name, ", ".join(actor.roles))
    console.print(table)


def display_languages(languages: list[Language]) -> None:
    """Affiche les langues supportees."""
    table = Table()
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Code")
    table.add_column("Langue")
    for language in languages:
        table.add_row(str(language.id), language.abbreviation, language.name)
    console.print(table)


def display_ratings(ratings: list[Rating], title: str = "Notes") -> None:
    """Affiche des notes utilisateur et communaute."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Utilisateur", justify="right")
    table.add_column("Communaute", justify="right")
    for rating in ratings:
        table.add_row(
            str(rating.id),
            str(rating.user_rating) or "-",
            str(rating.community_rating) or "-",
        )
    console.print(table)
