"""
Exceptions levees par le client TVDB.

Les erreurs de transport (connexion refusee, DNS, timeout) ne sont pas
enveloppees : l'exception httpx.TransportError d'origine remonte telle quelle.
"""

from typing import Optional


class TVDBError(Exception):
    """Exception de base du client TVDB."""


class TVDBStatusError(TVDBError):
    """
    Exception levee quand TVDB repond avec un code HTTP autre que 200.

    Attributes:
        url: URL demandee
        status_code: Code HTTP recu
    """

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed request for '{url}' got code '{status_code}'")


class TVDBParseError(TVDBError):
    """
    Exception levee quand la reponse n'est pas un XML exploitable.

    Couvre le XML mal forme comme les documents dont un champ ne se
    decode pas (entier invalide, date mal formee, element attendu absent).
    L'erreur d'origine est chainee via __cause__.

    Attributes:
        url: URL demandee (None si le decodage a eu lieu hors requete)
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.url = url
        if url:
            message = f"{message} (url: {url})"
        super().__init__(message)


class InvalidRatingError(TVDBError, ValueError):
    """
    Exception levee quand une note utilisateur sort de l'intervalle [0, 10].

    Levee avant toute requete HTTP.

    Attributes:
        rating: Note refusee
    """

    def __init__(self, rating: object) -> None:
        self.rating = rating
        super().__init__(f"Rating must be between 0 and 10 inclusive, got {rating!r}")
