"""
Couche domaine (core).

Contient les entités et objets valeur décodés depuis TheTVDB.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (HTTP, XML, CLI).

Sous-packages :
- entities/ : Entités (Series, SeriesSummary, Episode, Actor, Rating, Language)
- value_objects/ : Objets valeur immutables (NullInt, NullFloat, ImageFlag, RemoteService)
"""
