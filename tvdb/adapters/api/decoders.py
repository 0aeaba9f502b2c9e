"""
Decodeurs de champs pour les documents XML de TVDB.

Chaque decodeur recoit le texte brut d'un element (None si l'element est
absent ou vide) et renvoie la valeur typee. Un texte non vide mais invalide
leve ValueError ; le mapper XML la convertit en TVDBParseError.

Encodages geres:
- Listes separees par des pipes ("|Animation|Comedy|")
- Entiers et flottants optionnels (element vide = absent)
- Flag d'image EpImgFlag
- Horodatage Unix (lastupdated)
- Horodatage "YYYY-MM-DD HH:MM:SS" (added, thumb_added)
- Date "YYYY-MM-DD" (FirstAired)

Un texte vide donne None pour les deux formats de date : une seule
convention pour "date absente".
"""

import math
from datetime import date, datetime, timezone
from typing import Optional

from tvdb.core.value_objects import (
    NULL_FLOAT,
    NULL_IMG_FLAG,
    NULL_INT,
    ImageFlag,
    NullFloat,
    NullInt,
)

PIPE = "|"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


def decode_text(text: Optional[str]) -> str:
    """Retourne le texte de l'element, chaine vide si absent."""
    return text or ""


def _numeric_text(text: Optional[str]) -> str:
    # int() et float() acceptent "1_0", TVDB ne l'emet jamais
    content = decode_text(text).strip()
    if "_" in content:
        raise ValueError(f"invalid number: {content!r}")
    return content


def decode_pipe_list(text: Optional[str]) -> list[str]:
    """
    Decode une liste separee par des pipes.

    Les pipes en debut et fin sont retires avant le decoupage.
    Un texte vide donne une liste vide (jamais [""]).
    """
    content = decode_text(text).strip(PIPE)
    if not content:
        return []
    return content.split(PIPE)


def decode_int(text: Optional[str]) -> int:
    """Decode un entier obligatoire ; un element vide vaut 0."""
    content = _numeric_text(text)
    if not content:
        return 0
    return int(content)


def decode_null_int(text: Optional[str]) -> NullInt:
    """Decode un entier optionnel ; un element vide donne NULL_INT."""
    content = _numeric_text(text)
    if not content:
        return NULL_INT
    return NullInt.of(int(content))


def decode_null_float(text: Optional[str]) -> NullFloat:
    """
    Decode un flottant optionnel ; un element vide donne NULL_FLOAT.

    Seuls les nombres finis sont acceptes (pas de nan, inf ni "1_0").
    """
    content = _numeric_text(text)
    if not content:
        return NULL_FLOAT
    value = float(content)
    if not math.isfinite(value):
        raise ValueError(f"non-finite float: {content!r}")
    return NullFloat.of(value)


def decode_image_flag(text: Optional[str]) -> ImageFlag:
    """Decode EpImgFlag ; un element vide donne NULL_IMG_FLAG."""
    content = _numeric_text(text)
    if not content:
        return NULL_IMG_FLAG
    return ImageFlag(int(content), True)


def decode_unix_time(text: Optional[str]) -> Optional[datetime]:
    """Decode un horodatage Unix (secondes) en datetime UTC."""
    content = _numeric_text(text)
    if not content:
        return None
    try:
        return datetime.fromtimestamp(int(content), tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"timestamp out of range: {content!r}") from e


def decode_timestamp(text: Optional[str]) -> Optional[datetime]:
    """Decode un horodatage "YYYY-MM-DD HH:MM:SS" ; vide donne None."""
    content = decode_text(text).strip()
    if not content:
        return None
    return datetime.strptime(content, TIMESTAMP_FORMAT)


def decode_date(text: Optional[str]) -> Optional[date]:
    """Decode une date "YYYY-MM-DD" ; vide donne None."""
    content = decode_text(text).strip()
    if not content:
        return None
    return datetime.strptime(content, DATE_FORMAT).date()
