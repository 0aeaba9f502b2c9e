"""
Client de l'API XML de TVDB.

Construit les URLs (API dynamique et statique), execute un GET par appel
et convertit le XML recu en entites. Aucun cache, aucun retry : chaque
erreur remonte directement a l'appelant.

Reference API: http://thetvdb.com/wiki/index.php?title=Programmers_API
"""

import threading
from typing import Optional, Union

import httpx
from loguru import logger

from tvdb.adapters.api import xml_mapper
from tvdb.adapters.api.errors import InvalidRatingError, TVDBParseError
from tvdb.adapters.api.scraper import extract_series_ids
from tvdb.adapters.api.transport import fetch_document, request, request_xml
from tvdb.adapters.api.urls import URLBuilder
from tvdb.core.entities import (
    Actor,
    Episode,
    Language,
    Rating,
    Series,
    SeriesSummary,
)
from tvdb.core.value_objects import RemoteService
from tvdb.utils.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LANGUAGE,
    FAVORITE_ADD,
    FAVORITE_REMOVE,
    GET_RATINGS_FOR_USER_SCRIPT,
    GET_SERIES_BY_REMOTE_ID_SCRIPT,
    GET_SERIES_SCRIPT,
    ITEM_TYPE_EPISODE,
    ITEM_TYPE_SERIES,
    MAX_RATING,
    MIN_RATING,
    ORDER_ABSOLUTE,
    ORDER_DEFAULT,
    ORDER_DVD,
    USER_FAVORITES_SCRIPT,
    USER_PREFERRED_LANGUAGE_SCRIPT,
    USER_RATING_SCRIPT,
)


class TVDBClient:
    """
    Client TVDB pour les series, episodes et comptes utilisateurs.

    La cle API est inseree dans l'URL (pas d'en-tete d'authentification).
    La configuration (cle, hote, langue) est en lecture seule apres
    construction ; le client peut etre partage entre plusieurs appelants.

    Attributes:
        BASE_URL: URL de base par defaut de TVDB

    Example:
        with TVDBClient(api_key="your-api-key") as client:
            results = client.search_series("The Simpsons")
            series = client.series_all_by_id(results[0].id)
            for season, episodes in series.seasons.items():
                ...
    """

    BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        language: str = DEFAULT_LANGUAGE,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialise le client TVDB.

        Args:
            api_key: Cle API TVDB (obligatoire)
            base_url: Schema et hote, a surcharger pour un serveur de test
            language: Langue par defaut des requetes (code ISO 639-1)
            http_client: Client httpx a utiliser ; s'il est fourni, il n'est
                         pas ferme par close()
        """
        if not api_key:
            raise ValueError("TVDB API key is required")
        self._api_key = api_key
        self._language = language
        self._urls = URLBuilder(api_key, base_url)
        self._client = http_client
        self._owns_client = http_client is None
        self._client_lock = threading.Lock()

    @property
    def language(self) -> str:
        """Langue par defaut des requetes."""
        return self._language

    @property
    def base_url(self) -> str:
        return self._urls.base_url

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(follow_redirects=True)
            return self._client

    def _lang(self, language: Optional[str]) -> str:
        return language or self._language

    # Series

    def search_series(
        self, name: str, language: Optional[str] = None
    ) -> list[SeriesSummary]:
        """
        Recherche des series par nom (GetSeries.php).

        Args:
            name: Nom de la serie
            language: Langue des resultats (defaut: langue du client)

        Returns:
            Liste de SeriesSummary, vide si aucune serie ne correspond
        """
        url = self._urls.dynamic(
            GET_SERIES_SCRIPT,
            {"seriesname": name, "language": self._lang(language)},
        )
        results = fetch_document(self._get_client(), url, xml_mapper.parse_series_search)
        logger.debug(f"{len(results)} serie(s) pour '{name}'")
        return results

    def series_by_id(self, series_id: int, language: Optional[str] = None) -> Series:
        """
        Recupere la fiche de base d'une serie (series/<id>/<lang>.xml).

        Args:
            series_id: ID TVDB de la serie
            language: Langue de la fiche (defaut: langue du client)

        Returns:
            Series sans episodes (seasons vide)
        """
        url = self._urls.static("series", series_id, self._lang(language))
        return fetch_document(self._get_client(), url, xml_mapper.parse_series_document)

    def series_by_remote_id(
        self,
        service: Union[RemoteService, str],
        remote_id: str,
        language: Optional[str] = None,
    ) -> SeriesSummary:
        """
        Recherche une serie par l'identifiant d'un service externe.

        Args:
            service: Service distant (RemoteService.IMDB, RemoteService.ZAP2IT)
            remote_id: Identifiant chez ce service, ex: "tt0096697"
            language: Langue de la fiche (defaut: langue du client)

        Returns:
            SeriesSummary de la serie trouvee
        """
        service = RemoteService(service)
        url = self._urls.dynamic(
            GET_SERIES_BY_REMOTE_ID_SCRIPT,
            {service.value: remote_id, "language": self._lang(language)},
        )
        return fetch_document(
            self._get_client(), url, xml_mapper.parse_series_summary_document
        )

    def series_all_by_id(self, series_id: int, language: Optional[str] = None) -> Series:
        """
        Recupere la fiche complete d'une serie avec tous ses episodes.

        Les episodes sont regroupes par saison dans `Series.seasons`.

        Args:
            series_id: ID TVDB de la serie
            language: Langue de la fiche (defaut: langue du client)

        Returns:
            Series avec seasons renseigne
        """
        url = self._urls.static("series", series_id, "all", self._lang(language))
        series = fetch_document(
            self._get_client(), url, xml_mapper.parse_full_series_document
        )
        logger.debug(
            f"Serie {series_id}: {len(series.seasons)} saison(s), "
            f"{len(series.episodes)} episode(s)"
        )
        return series

    def actors(self, series_id: int) -> list[Actor]:
        """
        Recupere les acteurs d'une serie (series/<id>/actors.xml).

        Returns:
            Liste d'Actor dans l'ordre du document
        """
        url = self._urls.static("series", series_id, "actors")
        return fetch_document(self._get_client(), url, xml_mapper.parse_actors_document)

    def scrape_search(self, name: str, max_results: Optional[int] = None) -> list[int]:
        """
        Recherche des series via la page de recherche du site.

        Extrait les IDs par expression reguliere sur le HTML : best-effort,
        sensible aux changements de mise en page du site. En cas d'erreur,
        rien n'est retourne (l'exception remonte).

        Args:
            name: Nom de la serie
            max_results: Nombre maximum d'IDs (None = tous)

        Returns:
            Liste d'IDs de series dans l'ordre de la page
        """
        url = self._urls.search_page(name)
        response = request(self._get_client(), url)
        return extract_series_ids(response.text, max_results)

    # Episodes

    def episode_by_id(self, episode_id: int, language: Optional[str] = None) -> Episode:
        """
        Recupere un episode par son ID (episodes/<id>/<lang>.xml).
        """
        url = self._urls.static("episodes", episode_id, self._lang(language))
        return fetch_document(self._get_client(), url, xml_mapper.parse_episode_document)

    def episode_by_default_order(
        self,
        series_id: int,
        season: int,
        episode: int,
        language: Optional[str] = None,
    ) -> Episode:
        """Recupere un episode par saison/numero dans l'ordre de diffusion."""
        return self._episode_by_order(series_id, ORDER_DEFAULT, (season, episode), language)

    def episode_by_dvd_order(
        self,
        series_id: int,
        season: int,
        episode: int,
        language: Optional[str] = None,
    ) -> Episode:
        """Recupere un episode par saison/numero dans l'ordre DVD."""
        return self._episode_by_order(series_id, ORDER_DVD, (season, episode), language)

    def episode_by_absolute_order(
        self,
        series_id: int,
        absolute_number: int,
        language: Optional[str] = None,
    ) -> Episode:
        """Recupere un episode par son numero absolu."""
        return self._episode_by_order(
            series_id, ORDER_ABSOLUTE, (absolute_number,), language
        )

    def _episode_by_order(
        self,
        series_id: int,
        order: str,
        numbers: tuple[int, ...],
        language: Optional[str],
    ) -> Episode:
        """
        Recupere un episode selon un ordre de numerotation.

        Args:
            series_id: ID TVDB de la serie
            order: "default", "dvd" ou "absolute"
            numbers: (saison, episode) ou (numero absolu,)
            language: Langue de la fiche
        """
        url = self._urls.static(
            "series", series_id, order, *numbers, self._lang(language)
        )
        return fetch_document(self._get_client(), url, xml_mapper.parse_episode_document)

    # Langues

    def languages(self) -> list[Language]:
        """Liste les langues de contenu supportees (languages.xml)."""
        url = self._urls.static("languages")
        return fetch_document(
            self._get_client(), url, xml_mapper.parse_languages_document
        )

    def user_language(self, account_id: str) -> Language:
        """
        Retourne la langue preferee d'un utilisateur.

        Args:
            account_id: Identifiant de compte (pas le nom d'utilisateur),
                        visible sur la page du compte TVDB
        """
        url = self._urls.dynamic(USER_PREFERRED_LANGUAGE_SCRIPT, {"accountid": account_id})
        return fetch_document(
            self._get_client(), url, xml_mapper.parse_user_language_document
        )

    # Favoris

    def user_favorites(self, account_id: str) -> list[int]:
        """Retourne les IDs des series favorites d'un utilisateur."""
        return self._user_favorites(account_id)

    def add_user_favorite(self, account_id: str, series_id: int) -> list[int]:
        """Ajoute une serie aux favoris ; retourne la liste modifiee."""
        return self._user_favorites(account_id, FAVORITE_ADD, series_id)

    def remove_user_favorite(self, account_id: str, series_id: int) -> list[int]:
        """Retire une serie des favoris ; retourne la liste modifiee."""
        return self._user_favorites(account_id, FAVORITE_REMOVE, series_id)

    def _user_favorites(
        self,
        account_id: str,
        action: Optional[str] = None,
        series_id: Optional[int] = None,
    ) -> list[int]:
        params: dict[str, object] = {"accountid": account_id}
        if action:
            params["type"] = action
            params["seriesid"] = series_id
        url = self._urls.dynamic(USER_FAVORITES_SCRIPT, params)
        return fetch_document(
            self._get_client(), url, xml_mapper.parse_favorites_document
        )

    # Notes

    def user_ratings(self, account_id: str) -> list[Rating]:
        """
        Retourne les notes de l'utilisateur pour toutes ses series notees,
        avec la note de la communaute.
        """
        series_ratings, _ = self._ratings_for_user(account_id)
        return series_ratings

    def user_ratings_for_series(
        self, account_id: str, series_id: int
    ) -> tuple[Rating, list[Rating]]:
        """
        Retourne les notes d'une serie et de tous ses episodes.

        Returns:
            (note de la serie, notes des episodes)

        Raises:
            TVDBParseError: Si le document ne contient pas de note de serie
        """
        series_ratings, episode_ratings = self._ratings_for_user(account_id, series_id)
        return series_ratings[0], episode_ratings

    def _ratings_for_user(
        self, account_id: str, series_id: Optional[int] = None
    ) -> tuple[list[Rating], list[Rating]]:
        # Ce script attend la cle en parametre de requete
        params: dict[str, object] = {"apikey": self._api_key, "accountid": account_id}
        if series_id is not None:
            params["seriesid"] = series_id
        url = self._urls.dynamic(GET_RATINGS_FOR_USER_SCRIPT, params)

        def decode(root):
            series_ratings, episode_ratings = xml_mapper.parse_ratings_document(root)
            if series_id is not None and not series_ratings:
                raise TVDBParseError(f"No <Series> rating for series {series_id}")
            return series_ratings, episode_ratings

        return fetch_document(self._get_client(), url, decode)

    def set_series_rating(self, account_id: str, series_id: int, rating: int) -> None:
        """
        Enregistre la note d'un utilisateur pour une serie.

        Raises:
            InvalidRatingError: Si la note n'est pas un entier entre 0 et 10
                                (aucune requete n'est envoyee)
        """
        self._set_user_rating(account_id, ITEM_TYPE_SERIES, series_id, rating)

    def set_episode_rating(self, account_id: str, episode_id: int, rating: int) -> None:
        """
        Enregistre la note d'un utilisateur pour un episode.

        Raises:
            InvalidRatingError: Si la note n'est pas un entier entre 0 et 10
                                (aucune requete n'est envoyee)
        """
        self._set_user_rating(account_id, ITEM_TYPE_EPISODE, episode_id, rating)

    def _set_user_rating(
        self, account_id: str, item_type: str, item_id: int, rating: int
    ) -> None:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise InvalidRatingError(rating)
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidRatingError(rating)

        url = self._urls.dynamic(
            USER_RATING_SCRIPT,
            {
                "accountid": account_id,
                "itemtype": item_type,
                "itemid": item_id,
                "rating": rating,
            },
        )
        # La reponse contient la note du site, sans interet ici
        request_xml(self._get_client(), url)
        logger.info(f"Note {rating} enregistree pour {item_type} {item_id}")

    def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par ce client."""
        with self._client_lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None

    def __enter__(self) -> "TVDBClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
