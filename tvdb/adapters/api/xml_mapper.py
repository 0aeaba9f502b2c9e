"""
Conversion des documents XML de TVDB en entites.

Chaque entite est decrite par une table (attribut, element XML, decodeur).
Les noms d'elements sont imposes par TVDB et ne doivent pas etre modifies.

Toute valeur invalide leve TVDBParseError avec l'erreur d'origine chainee.
"""

from typing import Callable, Iterable
from xml.etree.ElementTree import Element

from tvdb.adapters.api.decoders import (
    decode_date,
    decode_image_flag,
    decode_int,
    decode_null_float,
    decode_null_int,
    decode_pipe_list,
    decode_text,
    decode_timestamp,
    decode_unix_time,
)
from tvdb.adapters.api.errors import TVDBParseError
from tvdb.core.entities import (
    Actor,
    Episode,
    Language,
    Rating,
    Series,
    SeriesSummary,
)

FieldTable = tuple[tuple[str, str, Callable], ...]

SERIES_SHARED_FIELDS: FieldTable = (
    ("id", "id", decode_int),
    ("name", "SeriesName", decode_text),
    ("banner_path", "banner", decode_text),
    ("overview", "Overview", decode_text),
    ("first_aired", "FirstAired", decode_date),
    ("imdb_id", "IMDB_ID", decode_text),
    ("zap2it_id", "zap2it_id", decode_text),
    ("network", "Network", decode_text),
)

SERIES_SUMMARY_FIELDS: FieldTable = SERIES_SHARED_FIELDS + (
    ("aliases", "AliasNames", decode_pipe_list),
)

SERIES_FIELDS: FieldTable = SERIES_SHARED_FIELDS + (
    ("actors", "Actors", decode_pipe_list),
    ("airs_day_of_week", "Airs_DayOfWeek", decode_text),
    ("airs_time", "Airs_Time", decode_text),
    ("content_rating", "ContentRating", decode_text),
    ("genres", "Genre", decode_pipe_list),
    ("network_id", "NetworkID", decode_text),
    ("rating", "Rating", decode_null_float),
    ("rating_count", "RatingCount", decode_null_int),
    ("runtime", "Runtime", decode_null_int),
    ("series_id", "SeriesID", decode_text),
    ("status", "Status", decode_text),
    ("added", "added", decode_timestamp),
    ("added_by", "addedBy", decode_null_int),
    ("fanart_path", "fanart", decode_text),
    ("poster_path", "poster", decode_text),
    ("last_updated", "lastupdated", decode_unix_time),
)

EPISODE_FIELDS: FieldTable = (
    ("id", "id", decode_int),
    ("combined_episode_number", "Combined_episodenumber", decode_text),
    ("combined_season", "Combined_season", decode_int),
    ("dvd_chapter", "DVD_chapter", decode_null_int),
    ("dvd_disc_id", "DVD_discid", decode_text),
    ("dvd_episode_number", "DVD_episodenumber", decode_text),
    ("dvd_season", "DVD_season", decode_null_int),
    ("directors", "Director", decode_pipe_list),
    ("image_flag", "EpImgFlag", decode_image_flag),
    ("name", "EpisodeName", decode_text),
    ("episode_number", "EpisodeNumber", decode_int),
    ("first_aired", "FirstAired", decode_date),
    ("guest_stars", "GuestStars", decode_pipe_list),
    ("imdb_id", "IMDB_ID", decode_text),
    ("language", "Language", decode_text),
    ("overview", "Overview", decode_text),
    ("production_code", "ProductionCode", decode_text),
    ("rating", "Rating", decode_null_float),
    ("rating_count", "RatingCount", decode_null_int),
    ("season_number", "SeasonNumber", decode_int),
    ("writers", "Writer", decode_pipe_list),
    ("absolute_number", "absolute_number", decode_null_int),
    ("filename", "filename", decode_text),
    ("last_updated", "lastupdated", decode_unix_time),
    ("season_id", "seasonid", decode_int),
    ("series_id", "seriesid", decode_int),
    ("thumb_added", "thumb_added", decode_timestamp),
    ("thumb_height", "thumb_height", decode_null_int),
    ("thumb_width", "thumb_width", decode_null_int),
)

ACTOR_FIELDS: FieldTable = (
    ("id", "id", decode_int),
    ("name", "Name", decode_text),
    ("roles", "Role", decode_pipe_list),
    ("sort_order", "SortOrder", decode_int),
    ("image_path", "Image", decode_text),
)

LANGUAGE_FIELDS: FieldTable = (
    ("id", "id", decode_int),
    ("abbreviation", "abbreviation", decode_text),
    ("name", "name", decode_text),
)

# <Series> porte l'ID dans seriesid, <Episode> dans id
RATING_FIELDS: FieldTable = (
    ("id", "id", decode_int),
    ("series_id", "seriesid", decode_int),
    ("user_rating", "UserRating", decode_null_int),
    ("community_rating", "CommunityRating", decode_null_float),
)


def decode_fields(element: Element, fields: FieldTable) -> dict:
    """
    Decode les sous-elements d'un element selon une table de champs.

    Args:
        element: Element XML parent (<Series>, <Episode>, ...)
        fields: Table (attribut, element, decodeur)

    Returns:
        Dictionnaire attribut -> valeur decodee

    Raises:
        TVDBParseError: Si un sous-element contient une valeur invalide
    """
    values = {}
    for attr, tag, decoder in fields:
        text = element.findtext(tag)
        try:
            values[attr] = decoder(text)
        except ValueError as e:
            raise TVDBParseError(
                f"Invalid value {text!r} for <{tag}> in <{element.tag}>: {e}"
            ) from e
    return values


def _series_language(element: Element) -> str:
    # Les resultats de recherche utilisent <language>, les fiches <Language> ;
    # un element vide compte comme absent
    return decode_text(element.findtext("language") or element.findtext("Language"))


def _require(root: Element, tag: str) -> Element:
    if root.tag == tag:
        return root
    element = root.find(tag)
    if element is None:
        raise TVDBParseError(f"No <{tag}> element in <{root.tag}> document")
    return element


def parse_series_summary(element: Element) -> SeriesSummary:
    """Convertit un element <Series> de recherche en SeriesSummary."""
    return SeriesSummary(
        language=_series_language(element),
        **decode_fields(element, SERIES_SUMMARY_FIELDS),
    )


def parse_series(element: Element) -> Series:
    """Convertit un element <Series> de fiche complete en Series."""
    return Series(
        language=_series_language(element),
        **decode_fields(element, SERIES_FIELDS),
    )


def parse_episode(element: Element) -> Episode:
    """Convertit un element <Episode> en Episode."""
    return Episode(**decode_fields(element, EPISODE_FIELDS))


def parse_actor(element: Element) -> Actor:
    """Convertit un element <Actor> en Actor."""
    return Actor(**decode_fields(element, ACTOR_FIELDS))


def parse_language(element: Element) -> Language:
    """Convertit un element <Language> en Language."""
    return Language(**decode_fields(element, LANGUAGE_FIELDS))


def parse_rating(element: Element) -> Rating:
    """
    Convertit un element <Series> ou <Episode> de notation en Rating.

    L'ID unifie prend `id` s'il est renseigne et non nul, sinon `seriesid`.
    """
    values = decode_fields(element, RATING_FIELDS)
    series_id = values.pop("series_id")
    if not values["id"]:
        values["id"] = series_id
    return Rating(**values)


def group_by_season(episodes: Iterable[Episode]) -> dict[int, list[Episode]]:
    """
    Regroupe des episodes par numero de saison.

    Chaque saison est triee par numero d'episode ; l'ordre du document est
    conserve a numero egal.
    """
    seasons: dict[int, list[Episode]] = {}
    for episode in episodes:
        seasons.setdefault(episode.season_number, []).append(episode)
    for season_episodes in seasons.values():
        season_episodes.sort(key=lambda ep: ep.episode_number)
    return seasons


# Documents


def parse_series_search(root: Element) -> list[SeriesSummary]:
    """<Data><Series/>*</Data> -> liste de SeriesSummary."""
    return [parse_series_summary(el) for el in root.findall("Series")]


def parse_series_summary_document(root: Element) -> SeriesSummary:
    """<Data><Series/></Data> -> SeriesSummary."""
    return parse_series_summary(_require(root, "Series"))


def parse_series_document(root: Element) -> Series:
    """<Data><Series/></Data> -> Series."""
    return parse_series(_require(root, "Series"))


def parse_full_series_document(root: Element) -> Series:
    """<Data><Series/><Episode/>*</Data> -> Series avec ses saisons."""
    series = parse_series_document(root)
    episodes = [parse_episode(el) for el in root.findall("Episode")]
    series.seasons = group_by_season(episodes)
    return series


def parse_episode_document(root: Element) -> Episode:
    """<Data><Episode/></Data> -> Episode."""
    return parse_episode(_require(root, "Episode"))


def parse_actors_document(root: Element) -> list[Actor]:
    """<Actors><Actor/>*</Actors> -> liste d'Actor."""
    return [parse_actor(el) for el in root.findall("Actor")]


def parse_languages_document(root: Element) -> list[Language]:
    """<Languages><Language/>*</Languages> -> liste de Language."""
    return [parse_language(el) for el in root.findall("Language")]


def parse_user_language_document(root: Element) -> Language:
    """<Data><Language/></Data> -> Language."""
    return parse_language(_require(root, "Language"))


def parse_favorites_document(root: Element) -> list[int]:
    """<Favorites><Series>ID</Series>*</Favorites> -> liste d'IDs de series."""
    favorites = []
    for element in root.findall("Series"):
        text = decode_text(element.text).strip()
        if not text:
            continue
        try:
            favorites.append(int(text))
        except ValueError as e:
            raise TVDBParseError(f"Invalid series ID {text!r} in <Favorites>: {e}") from e
    return favorites


def parse_ratings_document(root: Element) -> tuple[list[Rating], list[Rating]]:
    """
    <Data><Series/>*<Episode/>*</Data> -> (notes de series, notes d'episodes).
    """
    series_ratings = [parse_rating(el) for el in root.findall("Series")]
    episode_ratings = [parse_rating(el) for el in root.findall("Episode")]
    return series_ratings, episode_ratings

