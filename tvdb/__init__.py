"""
tvdb - Client pour l'API XML de TheTVDB.

Ce package construit les requêtes vers l'API (dynamique et statique),
décode les documents XML en entités typées et expose des méthodes
d'accès : recherche de séries, fiches séries/épisodes, acteurs, langues,
favoris et notes d'un utilisateur.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, objets valeur)
- adapters/ : Couche infrastructure (client HTTP/XML, CLI)

Example:
    from tvdb import TVDBClient

    with TVDBClient(api_key="your-api-key") as client:
        for summary in client.search_series("The Simpsons"):
            print(summary.id, summary.name, summary.first_aired)
"""

from loguru import logger

from tvdb.adapters.api import (
    InvalidRatingError,
    TVDBClient,
    TVDBError,
    TVDBParseError,
    TVDBStatusError,
    URLBuilder,
)
from tvdb.core.entities import (
    Actor,
    Episode,
    Language,
    Rating,
    Series,
    SeriesSummary,
)
from tvdb.core.value_objects import ImageFlag, NullFloat, NullInt, RemoteService

__version__ = "0.1.0"

# Silencieux par défaut ; configure_logging() réactive les logs
logger.disable("tvdb")

__all__ = [
    "TVDBClient",
    "URLBuilder",
    "TVDBError",
    "TVDBStatusError",
    "TVDBParseError",
    "InvalidRatingError",
    "Series",
    "SeriesSummary",
    "Episode",
    "Actor",
    "Rating",
    "Language",
    "NullInt",
    "NullFloat",
    "ImageFlag",
    "RemoteService",
]
