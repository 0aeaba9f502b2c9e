"""
Extraction des IDs de series depuis la page de recherche HTML de TVDB.

Recherche "utilisateur" du site (hors API). Elle trouve plus de resultats
que GetSeries.php mais depend du balisage HTML : a considerer comme
best-effort.
"""

import re
from typing import Optional

from loguru import logger

# Lien vers une fiche serie dans la liste de resultats
SERIES_LINK_PATTERN = re.compile(
    r'<a href="/\?tab=series&amp;id=(?P<series_id>\d+)&amp;lid=\d*">'
)


def extract_series_ids(html: str, max_results: Optional[int] = None) -> list[int]:
    """
    Extrait les IDs de series d'une page de resultats.

    Une serie listee dans plusieurs langues n'est retournee qu'une fois,
    a sa premiere position.

    Args:
        html: Contenu de la page de recherche
        max_results: Nombre maximum d'IDs a retourner (None = tous)

    Returns:
        Liste d'IDs dans l'ordre d'apparition
    """
    series_ids: list[int] = []
    if max_results is not None and max_results <= 0:
        return series_ids

    seen: set[int] = set()
    for match in SERIES_LINK_PATTERN.finditer(html):
        series_id = int(match.group("series_id"))
        if series_id in seen:
            continue
        seen.add(series_id)
        series_ids.append(series_id)
        if max_results is not None and len(series_ids) >= max_results:
            break

    logger.debug(f"{len(series_ids)} serie(s) trouvee(s) dans la page de recherche")
    return series_ids
