"""
Objets valeur immutables pour les champs TVDB a encodage particulier.

Exports :
- NullInt, NullFloat : numeriques distinguant "absent" de zero
- ImageFlag : flag de qualite de vignette avec libelle
- RemoteService : services distants (IMDb, Zap2it)
"""

from tvdb.core.value_objects.image_flag import (
    IMG_FLAG_16X9,
    IMG_FLAG_4X3,
    IMG_FLAG_BAD_ASPECT_RATIO,
    IMG_FLAG_BLACK_BARS,
    IMG_FLAG_IMPROPER_ACTION_SHOT,
    IMG_FLAG_TOO_SMALL,
    NULL_IMG_FLAG,
    ImageFlag,
)
from tvdb.core.value_objects.nullable import NULL_FLOAT, NULL_INT, NullFloat, NullInt
from tvdb.core.value_objects.remote import RemoteService

__all__ = [
    "NullInt",
    "NullFloat",
    "NULL_INT",
    "NULL_FLOAT",
    "ImageFlag",
    "NULL_IMG_FLAG",
    "IMG_FLAG_4X3",
    "IMG_FLAG_16X9",
    "IMG_FLAG_BAD_ASPECT_RATIO",
    "IMG_FLAG_TOO_SMALL",
    "IMG_FLAG_BLACK_BARS",
    "IMG_FLAG_IMPROPER_ACTION_SHOT",
    "RemoteService",
]
