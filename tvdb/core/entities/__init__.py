"""
Business entities decoded from TheTVDB documents.

Exports:
- SeriesFields: Fields shared by series-shaped records
- SeriesSummary: Series returned by search endpoints
- Series: Base series record, optionally with its seasons
- Episode: Individual episode of a series
- Actor: Actor credited on a series
- Rating: User and community rating
- Language: Content language
"""

from tvdb.core.entities.account import Language, Rating
from tvdb.core.entities.media import Actor, Episode, Series, SeriesFields, SeriesSummary

__all__ = [
    "SeriesFields",
    "SeriesSummary",
    "Series",
    "Episode",
    "Actor",
    "Rating",
    "Language",
]
