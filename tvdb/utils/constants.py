"""
Constantes globales du client TVDB.

Ce module contient:
- L'URL de base et la langue par defaut
- Les noms des scripts de l'API dynamique (PHP)
- Les ordres de numerotation des episodes
- Les bornes des notes utilisateur
"""

DEFAULT_BASE_URL = "http://thetvdb.com"
DEFAULT_LANGUAGE = "en"

# Scripts de l'API dynamique (<base>/api/<script>?<query>)
GET_SERIES_SCRIPT = "GetSeries.php"
GET_SERIES_BY_REMOTE_ID_SCRIPT = "GetSeriesByRemoteID.php"
USER_FAVORITES_SCRIPT = "User_Favorites.php"
GET_RATINGS_FOR_USER_SCRIPT = "GetRatingsForUser.php"
USER_RATING_SCRIPT = "User_Rating.php"
USER_PREFERRED_LANGUAGE_SCRIPT = "User_PreferredLanguage.php"

# Ordres de numerotation des episodes (segment de chemin de l'API statique)
ORDER_DEFAULT = "default"
ORDER_DVD = "dvd"
ORDER_ABSOLUTE = "absolute"

# Types d'elements notables via User_Rating.php
ITEM_TYPE_SERIES = "series"
ITEM_TYPE_EPISODE = "episode"

# Actions sur les favoris
FAVORITE_ADD = "add"
FAVORITE_REMOVE = "remove"

MIN_RATING = 0
MAX_RATING = 10
