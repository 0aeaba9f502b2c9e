"""
Utilitaires et constantes pour le client TVDB.

Ce module contient les constantes partagees.
"""

from tvdb.utils.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LANGUAGE,
    MAX_RATING,
    MIN_RATING,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_LANGUAGE",
    "MIN_RATING",
    "MAX_RATING",
]
