"""
Indicateur de qualite de la vignette d'un episode (element EpImgFlag).
"""

from dataclasses import dataclass

# Libelles publies par TVDB pour EpImgFlag
IMAGE_FLAG_NAMES = {
    1: "4:3",
    2: "16x9",
    3: "Invalid Aspect Ratio",
    4: "Image Too Small",
    5: "Black Bars",
    6: "Improper Action Shot",
}


@dataclass(frozen=True)
class ImageFlag:
    """
    Flag d'image d'un episode.

    Attributs :
        value : Code numerique du flag
        valid : True si le flag etait renseigne

    Propriétés :
        name : Libelle lisible, ou le code en texte s'il est inconnu
    """

    value: int = 0
    valid: bool = False

    @property
    def name(self) -> str:
        if not self.valid:
            return ""
        return IMAGE_FLAG_NAMES.get(self.value, str(self.value))

    def __str__(self) -> str:
        return self.name


NULL_IMG_FLAG = ImageFlag()
IMG_FLAG_4X3 = ImageFlag(1, True)
IMG_FLAG_16X9 = ImageFlag(2, True)
IMG_FLAG_BAD_ASPECT_RATIO = ImageFlag(3, True)
IMG_FLAG_TOO_SMALL = ImageFlag(4, True)
IMG_FLAG_BLACK_BARS = ImageFlag(5, True)
IMG_FLAG_IMPROPER_ACTION_SHOT = ImageFlag(6, True)
