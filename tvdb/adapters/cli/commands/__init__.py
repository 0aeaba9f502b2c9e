"""Sous-package CLI commands - re-exporte les commandes publiques."""

from tvdb.adapters.cli.commands.account_commands import (
    favorites,
    rate,
    ratings,
    user_language,
)
from tvdb.adapters.cli.commands.series_commands import (
    actors,
    episode,
    languages,
    remote,
    search,
    series,
)

__all__ = [
    # series
    "search",
    "series",
    "episode",
    "actors",
    "remote",
    "languages",
    # account
    "favorites",
    "ratings",
    "rate",
    "user_language",
]
