"""
Requetes HTTP vers TVDB et decodage XML des reponses.

Une requete = un GET. Pas de retry : toute erreur remonte a l'appelant.

- Code HTTP != 200 -> TVDBStatusError (url + code)
- Erreur de transport -> httpx.TransportError d'origine
- XML mal forme ou champ invalide -> TVDBParseError (erreur d'origine chainee)

Usage:
    with httpx.Client() as client:
        series = fetch_document(client, url, parse_series_document)
"""

from typing import Callable, TypeVar
from xml.etree import ElementTree

import httpx
from loguru import logger

from tvdb.adapters.api.errors import TVDBParseError, TVDBStatusError

T = TypeVar("T")


def request(client: httpx.Client, url: str) -> httpx.Response:
    """
    Execute un GET et verifie le code de retour.

    Args:
        client: Client httpx synchrone
        url: URL complete

    Returns:
        httpx.Response avec un code 200

    Raises:
        TVDBStatusError: Si le code HTTP n'est pas 200
        httpx.TransportError: Si la connexion echoue
    """
    logger.debug(f"GET {url}")
    response = client.get(url)
    if response.status_code != 200:
        logger.debug(f"Reponse {response.status_code} pour {url}")
        raise TVDBStatusError(url, response.status_code)
    return response


def request_xml(client: httpx.Client, url: str) -> ElementTree.Element:
    """
    Execute un GET et parse le corps de la reponse en XML.

    Returns:
        Element racine du document

    Raises:
        TVDBStatusError: Si le code HTTP n'est pas 200
        TVDBParseError: Si le corps n'est pas du XML valide
    """
    response = request(client, url)
    try:
        return ElementTree.fromstring(response.content)
    except ElementTree.ParseError as e:
        raise TVDBParseError(f"Malformed XML: {e}", url=url) from e


def fetch_document(
    client: httpx.Client,
    url: str,
    decode: Callable[[ElementTree.Element], T],
) -> T:
    """
    Recupere un document XML et le convertit avec `decode`.

    Les TVDBParseError levees par `decode` sont completees avec l'URL.

    Args:
        client: Client httpx synchrone
        url: URL complete
        decode: Fonction Element -> entite (voir xml_mapper)

    Returns:
        Resultat de `decode`
    """
    root = request_xml(client, url)
    try:
        return decode(root)
    except TVDBParseError as e:
        if e.url is not None:
            raise
        raise TVDBParseError(str(e), url=url) from (e.__cause__ or e)
