"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- search / series / episode / actors / remote / languages
- favorites / ratings / rate / user-language
- erreurs: cle API absente, compte absent, erreur TVDB
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from tests.fixtures.tvdb_responses import ACCOUNT_ID, SIMPSONS_ID
from tvdb.adapters.api.errors import InvalidRatingError, TVDBStatusError
from tvdb.adapters.api.tvdb_client import TVDBClient
from tvdb.core.entities import Actor, Episode, Language, Rating, Series, SeriesSummary
from tvdb.core.value_objects import NullFloat, NullInt, RemoteService
from tvdb.main import app

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Evite l'installation des handlers loguru par le callback principal."""
    with patch("tvdb.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_client() -> MagicMock:
    """Client TVDB simule, sans reseau."""
    return MagicMock(spec=TVDBClient)


@pytest.fixture
def mock_container(mock_client: MagicMock):
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est la que open_client()
    et resolve_account() l'importent et l'instancient.
    """
    with patch("tvdb.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.config.return_value = MagicMock(
            api_enabled=True,
            account_id=ACCOUNT_ID,
        )
        container_instance.tvdb_client.return_value = mock_client
        yield container_instance


@pytest.fixture
def simpsons_summary() -> SeriesSummary:
    return SeriesSummary(
        id=SIMPSONS_ID,
        language="en",
        name="The Simpsons",
        first_aired=date(1989, 12, 17),
        network="FOX",
    )


@pytest.fixture
def roasting_episode() -> Episode:
    return Episode(
        id=55452,
        name="Simpsons Roasting on an Open Fire",
        season_number=1,
        episode_number=1,
        first_aired=date(1989, 12, 17),
        directors=["David Silverman"],
        absolute_number=NullInt.of(1),
    )


# ============================================================================
# Consultation
# ============================================================================


class TestSearchCommand:
    def test_search_displays_results(
        self, mock_container, mock_client, simpsons_summary
    ) -> None:
        mock_client.search_series.return_value = [simpsons_summary]

        result = runner.invoke(app, ["search", "The Simpsons"])

        assert result.exit_code == 0
        assert "The Simpsons" in result.output
        assert "1989" in result.output
        mock_client.search_series.assert_called_once_with("The Simpsons", None)
        mock_client.close.assert_called_once()

    def test_search_no_results(self, mock_container, mock_client) -> None:
        mock_client.search_series.return_value = []

        result = runner.invoke(app, ["search", "Nonexistent"])

        assert result.exit_code == 0
        assert "Aucune serie trouvee" in result.output

    def test_search_scrape(self, mock_container, mock_client) -> None:
        mock_client.scrape_search.return_value = [71663, 153221]

        result = runner.invoke(app, ["search", "The Simpsons", "--scrape", "--max", "2"])

        assert result.exit_code == 0
        assert "153221" in result.output
        mock_client.scrape_search.assert_called_once_with("The Simpsons", 2)

    def test_missing_api_key(self, mock_container, mock_client) -> None:
        mock_container.config.return_value = MagicMock(api_enabled=False)

        result = runner.invoke(app, ["search", "The Simpsons"])

        assert result.exit_code == 1
        assert "TVDB_API_KEY" in result.output
        mock_client.search_series.assert_not_called()

    def test_tvdb_error_exits_with_code_1(self, mock_container, mock_client) -> None:
        mock_client.search_series.side_effect = TVDBStatusError("http://tvdb.test/api", 503)

        result = runner.invoke(app, ["search", "The Simpsons"])

        assert result.exit_code == 1
        assert "503" in result.output
        mock_client.close.assert_called_once()


class TestSeriesCommand:
    def test_series_base_record(self, mock_container, mock_client) -> None:
        mock_client.series_by_id.return_value = Series(
            id=SIMPSONS_ID,
            name="The Simpsons",
            genres=["Animation", "Comedy"],
            rating=NullFloat.of(9.0),
        )

        result = runner.invoke(app, ["series", "71663"])

        assert result.exit_code == 0
        assert "Animation, Comedy" in result.output
        mock_client.series_by_id.assert_called_once_with(SIMPSONS_ID, None)

    def test_series_all_episodes(self, mock_container, mock_client, roasting_episode) -> None:
        mock_client.series_all_by_id.return_value = Series(
            id=SIMPSONS_ID, name="The Simpsons", seasons={1: [roasting_episode]}
        )

        result = runner.invoke(app, ["series", "71663", "--all", "-l", "fr"])

        assert result.exit_code == 0
        assert "S01E01" in result.output
        mock_client.series_all_by_id.assert_called_once_with(SIMPSONS_ID, "fr")


class TestEpisodeCommand:
    def test_episode_by_id(self, mock_container, mock_client, roasting_episode) -> None:
        mock_client.episode_by_id.return_value = roasting_episode

        result = runner.invoke(app, ["episode", "55452"])

        assert result.exit_code == 0
        assert "Simpsons Roasting on an Open Fire" in result.output
        mock_client.episode_by_id.assert_called_once_with(55452, None)

    def test_episode_by_default_order(
        self, mock_container, mock_client, roasting_episode
    ) -> None:
        mock_client.episode_by_default_order.return_value = roasting_episode

        result = runner.invoke(
            app, ["episode", "--series", "71663", "--season", "1", "--number", "1"]
        )

        assert result.exit_code == 0
        mock_client.episode_by_default_order.assert_called_once_with(SIMPSONS_ID, 1, 1, None)

    def test_episode_by_dvd_order(self, mock_container, mock_client, roasting_episode) -> None:
        mock_client.episode_by_dvd_order.return_value = roasting_episode

        result = runner.invoke(
            app,
            ["episode", "-s", "71663", "--season", "1", "-n", "1", "--order", "dvd"],
        )

        assert result.exit_code == 0
        mock_client.episode_by_dvd_order.assert_called_once_with(SIMPSONS_ID, 1, 1, None)

    def test_episode_by_absolute_order(
        self, mock_container, mock_client, roasting_episode
    ) -> None:
        mock_client.episode_by_absolute_order.return_value = roasting_episode

        result = runner.invoke(
            app, ["episode", "-s", "71663", "-n", "1", "--order", "absolute"]
        )

        assert result.exit_code == 0
        mock_client.episode_by_absolute_order.assert_called_once_with(SIMPSONS_ID, 1, None)

    def test_unknown_order(self, mock_container, mock_client) -> None:
        result = runner.invoke(
            app, ["episode", "-s", "71663", "-n", "1", "--order", "production"]
        )

        assert result.exit_code == 1
        assert "ordre inconnu" in result.output

    def test_missing_season(self, mock_container, mock_client) -> None:
        result = runner.invoke(app, ["episode", "-s", "71663", "-n", "1"])

        assert result.exit_code == 1
        assert "--season" in result.output
        mock_client.episode_by_default_order.assert_not_called()

    def test_missing_arguments(self, mock_container, mock_client) -> None:
        result = runner.invoke(app, ["episode"])
        assert result.exit_code == 1


class TestOtherLookups:
    def test_actors(self, mock_container, mock_client) -> None:
        mock_client.actors.return_value = [
            Actor(id=2, name="Julie Kavner", roles=["Marge Simpson"], sort_order=1),
            Actor(id=1, name="Dan Castellaneta", roles=["Homer Simpson"], sort_order=0),
        ]

        result = runner.invoke(app, ["actors", "71663"])

        assert result.exit_code == 0
        assert result.output.index("Dan Castellaneta") < result.output.index("Julie Kavner")

    def test_remote(self, mock_container, mock_client, simpsons_summary) -> None:
        mock_client.series_by_remote_id.return_value = simpsons_summary

        result = runner.invoke(app, ["remote", "imdbid", "tt0096697"])

        assert result.exit_code == 0
        assert "The Simpsons" in result.output
        mock_client.series_by_remote_id.assert_called_once_with(
            RemoteService.IMDB, "tt0096697", None
        )

    def test_languages(self, mock_container, mock_client) -> None:
        mock_client.languages.return_value = [Language(id=7, abbreviation="en", name="English")]

        result = runner.invoke(app, ["languages"])

        assert result.exit_code == 0
        assert "English" in result.output


# ============================================================================
# Compte utilisateur
# ============================================================================


class TestFavoritesCommand:
    def test_list(self, mock_container, mock_client) -> None:
        mock_client.user_favorites.return_value = [71663]

        result = runner.invoke(app, ["favorites"])

        assert result.exit_code == 0
        assert "71663" in result.output
        mock_client.user_favorites.assert_called_once_with(ACCOUNT_ID)

    def test_add(self, mock_container, mock_client) -> None:
        mock_client.add_user_favorite.return_value = [71663, 73871]

        result = runner.invoke(app, ["favorites", "--account", "ABC", "--add", "73871"])

        assert result.exit_code == 0
        mock_client.add_user_favorite.assert_called_once_with("ABC", 73871)

    def test_remove(self, mock_container, mock_client) -> None:
        mock_client.remove_user_favorite.return_value = []

        result = runner.invoke(app, ["favorites", "--remove", "71663"])

        assert result.exit_code == 0
        assert "Aucun favori" in result.output

    def test_add_and_remove_are_exclusive(self, mock_container, mock_client) -> None:
        result = runner.invoke(app, ["favorites", "--add", "1", "--remove", "2"])
        assert result.exit_code == 1

    def test_missing_account(self, mock_container, mock_client) -> None:
        mock_container.config.return_value = MagicMock(api_enabled=True, account_id=None)

        result = runner.invoke(app, ["favorites"])

        assert result.exit_code == 1
        assert "TVDB_ACCOUNT_ID" in result.output


class TestRatingsCommands:
    def test_ratings(self, mock_container, mock_client) -> None:
        mock_client.user_ratings.return_value = [
            Rating(id=71663, user_rating=NullInt.of(9), community_rating=NullFloat.of(8.9))
        ]

        result = runner.invoke(app, ["ratings"])

        assert result.exit_code == 0
        assert "8.9" in result.output

    def test_ratings_for_series(self, mock_container, mock_client) -> None:
        mock_client.user_ratings_for_series.return_value = (
            Rating(id=71663, user_rating=NullInt.of(9)),
            [Rating(id=55452, community_rating=NullFloat.of(7.2))],
        )

        result = runner.invoke(app, ["ratings", "--series", "71663"])

        assert result.exit_code == 0
        assert "55452" in result.output
        mock_client.user_ratings_for_series.assert_called_once_with(ACCOUNT_ID, SIMPSONS_ID)

    def test_rate_series(self, mock_container, mock_client) -> None:
        result = runner.invoke(app, ["rate", "71663", "7"])

        assert result.exit_code == 0
        mock_client.set_series_rating.assert_called_once_with(ACCOUNT_ID, SIMPSONS_ID, 7)

    def test_rate_episode(self, mock_container, mock_client) -> None:
        result = runner.invoke(app, ["rate", "55452", "8", "--episode"])

        assert result.exit_code == 0
        mock_client.set_episode_rating.assert_called_once_with(ACCOUNT_ID, 55452, 8)

    def test_rate_out_of_range(self, mock_container, mock_client) -> None:
        mock_client.set_series_rating.side_effect = InvalidRatingError(11)

        result = runner.invoke(app, ["rate", "71663", "11"])

        assert result.exit_code == 1
        assert "between 0 and 10" in result.output

    def test_user_language(self, mock_container, mock_client) -> None:
        mock_client.user_language.return_value = Language(
            id=7, abbreviation="en", name="English"
        )

        result = runner.invoke(app, ["user-language"])

        assert result.exit_code == 0
        assert "English (en)" in result.output


class TestInfoCommand:
    def test_info(self, test_settings) -> None:
        with patch("tvdb.main.get_config", return_value=test_settings):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "http://tvdb.test" in result.output
        assert "configurée" in result.output

    def test_verbosity_sets_console_level(self, test_settings, no_logging_setup) -> None:
        with patch("tvdb.main.get_config", return_value=test_settings):
            runner.invoke(app, ["-vv", "info"])

        assert no_logging_setup.call_args.kwargs["log_level"] == "DEBUG"

    def test_quiet(self, test_settings, no_logging_setup) -> None:
        with patch("tvdb.main.get_config", return_value=test_settings):
            runner.invoke(app, ["-q", "info"])

        assert no_logging_setup.call_args.kwargs["log_level"] == "ERROR"
