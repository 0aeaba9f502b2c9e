"""Services externes acceptes par GetSeriesByRemoteID.php."""

from enum import Enum


class RemoteService(str, Enum):
    """
    Identifiant de service distant.

    La valeur est le nom du parametre de requete attendu par TVDB.
    """

    IMDB = "imdbid"
    ZAP2IT = "zap2it"
