"""
User account entities: ratings and languages.
"""

from dataclasses import dataclass

from tvdb.core.value_objects import NULL_FLOAT, NULL_INT, NullFloat, NullInt


@dataclass
class Rating:
    """
    User and community rating of a series or an episode.

    The XML carries the rated item's ID as `seriesid` inside a <Series>
    rating and as `id` inside an <Episode> rating; both land in `id`.

    Attributes:
        id: ID of the rated series or episode
        user_rating: Rating given by the user (UserRating)
        community_rating: Average community rating (CommunityRating)
    """

    id: int = 0
    user_rating: NullInt = NULL_INT
    community_rating: NullFloat = NULL_FLOAT


@dataclass
class Language:
    """
    Content language supported by TheTVDB.

    Attributes:
        id: TheTVDB language ID
        abbreviation: ISO 639-1 code, e.g. "en"
        name: Display name, e.g. "English"
    """

    id: int = 0
    abbreviation: str = ""
    name: str = ""
