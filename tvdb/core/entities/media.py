"""
Media metadata entities.

Records mirroring TheTVDB XML documents: series (summary and base record),
episodes and actors. Field names are Pythonic; the XML element each field
comes from is listed in the class docstring.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from tvdb.core.value_objects import (
    NULL_FLOAT,
    NULL_IMG_FLAG,
    NULL_INT,
    ImageFlag,
    NullFloat,
    NullInt,
)


@dataclass
class SeriesFields:
    """
    Fields shared by every series-shaped record.

    Attributes:
        id: TheTVDB series ID (id)
        language: Language of the record (language / Language)
        name: Series name (SeriesName)
        banner_path: Relative path to the banner image (banner)
        overview: Series description (Overview)
        first_aired: First air date (FirstAired)
        imdb_id: IMDb identifier, e.g. "tt0096697" (IMDB_ID)
        zap2it_id: Zap2it identifier (zap2it_id)
        network: Broadcasting network (Network)
    """

    id: int = 0
    language: str = ""
    name: str = ""
    banner_path: str = ""
    overview: str = ""
    first_aired: Optional[date] = None
    imdb_id: str = ""
    zap2it_id: str = ""
    network: str = ""


@dataclass
class SeriesSummary(SeriesFields):
    """
    Series as returned by the search endpoints.

    Attributes:
        aliases: Alternative names (AliasNames)
    """

    aliases: list[str] = field(default_factory=list)


@dataclass
class Episode:
    """
    Individual episode of a TV series.

    Numbering is available in three schemes: aired order (season_number,
    episode_number), DVD order (dvd_season, dvd_episode_number) and absolute
    order (absolute_number).

    Attributes:
        id: TheTVDB episode ID (id)
        combined_episode_number: Combined_episodenumber
        combined_season: Combined_season
        dvd_chapter: DVD_chapter
        dvd_disc_id: DVD_discid
        dvd_episode_number: DVD episode number, kept as text ("1.0") (DVD_episodenumber)
        dvd_season: DVD_season
        directors: Director
        image_flag: Thumbnail quality flag (EpImgFlag)
        name: EpisodeName
        episode_number: EpisodeNumber
        first_aired: FirstAired
        guest_stars: GuestStars
        imdb_id: IMDB_ID
        language: Language
        overview: Overview
        production_code: ProductionCode
        rating: Community rating (Rating)
        rating_count: RatingCount
        season_number: SeasonNumber
        writers: Writer
        absolute_number: absolute_number
        filename: Relative path to the thumbnail (filename)
        last_updated: Last modification, UTC (lastupdated)
        season_id: seasonid
        series_id: seriesid
        thumb_added: thumb_added
        thumb_height: thumb_height
        thumb_width: thumb_width
    """

    id: int = 0
    combined_episode_number: str = ""
    combined_season: int = 0
    dvd_chapter: NullInt = NULL_INT
    dvd_disc_id: str = ""
    dvd_episode_number: str = ""
    dvd_season: NullInt = NULL_INT
    directors: list[str] = field(default_factory=list)
    image_flag: ImageFlag = NULL_IMG_FLAG
    name: str = ""
    episode_number: int = 0
    first_aired: Optional[date] = None
    guest_stars: list[str] = field(default_factory=list)
    imdb_id: str = ""
    language: str = ""
    overview: str = ""
    production_code: str = ""
    rating: NullFloat = NULL_FLOAT
    rating_count: NullInt = NULL_INT
    season_number: int = 0
    writers: list[str] = field(default_factory=list)
    absolute_number: NullInt = NULL_INT
    filename: str = ""
    last_updated: Optional[datetime] = None
    season_id: int = 0
    series_id: int = 0
    thumb_added: Optional[datetime] = None
    thumb_height: NullInt = NULL_INT
    thumb_width: NullInt = NULL_INT


@dataclass
class Series(SeriesFields):
    """
    Base series record.

    `seasons` is only populated by the full series record (series plus all
    its episodes); it maps a season number to the episodes of that season,
    sorted by episode number.

    Attributes:
        actors: Actors
        airs_day_of_week: Airs_DayOfWeek
        airs_time: Airs_Time
        content_rating: ContentRating
        genres: Genre
        network_id: NetworkID
        rating: Community rating (Rating)
        rating_count: RatingCount
        runtime: Runtime in minutes (Runtime)
        series_id: Legacy TV.com identifier (SeriesID)
        status: "Continuing" or "Ended" (Status)
        added: Date the series was added (added)
        added_by: ID of the user who added it (addedBy)
        fanart_path: fanart
        poster_path: poster
        last_updated: Last modification, UTC (lastupdated)
        seasons: Episodes grouped by season number
    """

    actors: list[str] = field(default_factory=list)
    airs_day_of_week: str = ""
    airs_time: str = ""
    content_rating: str = ""
    genres: list[str] = field(default_factory=list)
    network_id: str = ""
    rating: NullFloat = NULL_FLOAT
    rating_count: NullInt = NULL_INT
    runtime: NullInt = NULL_INT
    series_id: str = ""
    status: str = ""
    added: Optional[datetime] = None
    added_by: NullInt = NULL_INT
    fanart_path: str = ""
    poster_path: str = ""
    last_updated: Optional[datetime] = None
    seasons: dict[int, list[Episode]] = field(default_factory=dict)

    @property
    def episodes(self) -> list[Episode]:
        """All episodes, ordered by season number then episode number."""
        return [ep for number in sorted(self.seasons) for ep in self.seasons[number]]


@dataclass
class Actor:
    """
    Actor credited on a series.

    Attributes:
        id: TheTVDB actor ID (id)
        name: Name
        roles: Characters played (Role)
        sort_order: Billing order, 0 first (SortOrder)
        image_path: Relative path to the portrait (Image)
    """

    id: int = 0
    name: str = ""
    roles: list[str] = field(default_factory=list)
    sort_order: int = 0
    image_path: str = ""
