"""
Tests unitaires pour les requetes HTTP et le decodage XML.

Utilise respx pour simuler les reponses du serveur.
"""

import httpx
import pytest
import respx

from tests.fixtures.tvdb_responses import MALFORMED_XML, SERIES_RESPONSE
from tvdb.adapters.api.errors import TVDBParseError, TVDBStatusError
from tvdb.adapters.api.transport import fetch_document, request, request_xml
from tvdb.adapters.api.xml_mapper import parse_episode_document, parse_series_document

URL = "http://tvdb.test/api/KEY/series/71663/en.xml"


class TestRequest:
    @respx.mock
    def test_ok(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(200, text="<Data/>"))
        with httpx.Client() as client:
            assert request(client, URL).status_code == 200

    @respx.mock
    def test_non_200_raises_status_error(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(404))
        with httpx.Client() as client:
            with pytest.raises(TVDBStatusError) as exc_info:
                request(client, URL)

        error = exc_info.value
        assert error.status_code == 404
        assert error.url == URL
        assert str(error) == f"Failed request for '{URL}' got code '404'"

    @respx.mock
    def test_transport_error_propagates(self) -> None:
        respx.get(URL).mock(side_effect=httpx.ConnectError("Connection refused"))
        with httpx.Client() as client:
            with pytest.raises(httpx.ConnectError):
                request(client, URL)


class TestRequestXML:
    @respx.mock
    def test_malformed_xml(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(200, text=MALFORMED_XML))
        with httpx.Client() as client:
            with pytest.raises(TVDBParseError) as exc_info:
                request_xml(client, URL)

        assert exc_info.value.url == URL
        assert exc_info.value.__cause__ is not None

    @respx.mock
    def test_status_checked_before_parsing(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(500, text="<html>error</html>"))
        with httpx.Client() as client:
            with pytest.raises(TVDBStatusError):
                request_xml(client, URL)


class TestFetchDocument:
    @respx.mock
    def test_decodes_document(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(200, text=SERIES_RESPONSE))
        with httpx.Client() as client:
            series = fetch_document(client, URL, parse_series_document)
        assert series.name == "The Simpsons"

    @respx.mock
    def test_decode_error_carries_url(self) -> None:
        """Un document sans l'element attendu donne TVDBParseError avec l'URL."""
        respx.get(URL).mock(return_value=httpx.Response(200, text=SERIES_RESPONSE))
        with httpx.Client() as client:
            with pytest.raises(TVDBParseError) as exc_info:
                fetch_document(client, URL, parse_episode_document)

        assert exc_info.value.url == URL
        assert URL in str(exc_info.value)
