"""
Client de l'API XML de TVDB.

Ce module fournit:
- TVDBClient: Methodes publiques (series, episodes, acteurs, langues, compte)
- URLBuilder: Construction des URLs dynamiques et statiques
- Exceptions: TVDBError, TVDBStatusError, TVDBParseError, InvalidRatingError

Les decodeurs de champs sont dans decoders.py, la conversion XML -> entites
dans xml_mapper.py.
"""

from tvdb.adapters.api.errors import (
    InvalidRatingError,
    TVDBError,
    TVDBParseError,
    TVDBStatusError,
)
from tvdb.adapters.api.tvdb_client import TVDBClient
from tvdb.adapters.api.urls import URLBuilder

__all__ = [
    "TVDBClient",
    "URLBuilder",
    "TVDBError",
    "TVDBStatusError",
    "TVDBParseError",
    "InvalidRatingError",
]
