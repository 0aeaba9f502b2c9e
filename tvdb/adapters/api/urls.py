"""
Construction des URLs de l'API TVDB.

Deux familles d'URLs:
- API dynamique : <base>/api/<script>.php?<query> (recherches, compte utilisateur)
- API statique  : <base>/api/<cle>/<chemin>.xml (fiches series/episodes)

Les parametres de requete sont encodes en pourcentage (espace -> %20).
"""

from urllib.parse import quote, urlencode

from tvdb.utils.constants import DEFAULT_BASE_URL


class URLBuilder:
    """
    Fabrique d'URLs pour un compte API et un hote donnes.

    Immuable apres construction.

    Example:
        urls = URLBuilder(api_key="ABCDEF", base_url="http://localhost:8080")
        urls.static("series", 71663, "en")
        # "http://localhost:8080/api/ABCDEF/series/71663/en.xml"
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        """
        Initialise le constructeur d'URLs.

        Args:
            api_key: Cle API TVDB (insere dans le chemin des URLs statiques)
            base_url: Schema et hote, ex: "http://thetvdb.com"
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def dynamic(self, script: str, params: dict[str, object]) -> str:
        """
        URL d'un script de l'API dynamique.

        Args:
            script: Nom du script, ex: "GetSeries.php"
            params: Parametres de requete, dans l'ordre d'insertion

        Returns:
            URL complete avec la query string encodee
        """
        query = urlencode(
            {key: str(value) for key, value in params.items()},
            quote_via=quote,
        )
        return f"{self._base_url}/api/{script}?{query}"

    def static(self, *segments: object) -> str:
        """
        URL d'un document de l'API statique.

        Args:
            *segments: Segments du chemin apres la cle ; ".xml" est ajoute
                       au dernier. Ex: ("series", 71663, "all", "en")

        Returns:
            URL complete, ex: "<base>/api/<cle>/series/71663/all/en.xml"
        """
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self._base_url}/api/{quote(self._api_key, safe='')}/{path}.xml"

    def search_page(self, name: str) -> str:
        """URL de la page de recherche HTML du site (hors API)."""
        query = urlencode(
            {
                "string": name,
                "searchseriesid": "",
                "tab": "listseries",
                "function": "Search",
            },
            quote_via=quote,
        )
        return f"{self._base_url}/?{query}"

