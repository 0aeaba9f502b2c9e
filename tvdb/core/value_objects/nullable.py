"""
Objets valeur pour les champs numeriques optionnels de TVDB.

TVDB renvoie souvent des elements vides (<Rating></Rating>) pour signaler
une valeur inconnue. Ces objets distinguent "absent" de "zero" : un NullInt
absent garde value=0 mais valid=False.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NullInt:
    """
    Entier pouvant etre absent.

    Attributs :
        value : Valeur numerique (0 si absente)
        valid : True si la valeur etait presente dans le document
    """

    value: int = 0
    valid: bool = False

    @classmethod
    def of(cls, value: int) -> "NullInt":
        """Construit une valeur presente."""
        return cls(value=value, valid=True)

    def as_optional(self) -> Optional[int]:
        """Retourne la valeur, ou None si absente."""
        return self.value if self.valid else None

    def __str__(self) -> str:
        return str(self.value) if self.valid else ""


@dataclass(frozen=True)
class NullFloat:
    """
    Flottant pouvant etre absent.

    Attributs :
        value : Valeur numerique (0.0 si absente)
        valid : True si la valeur etait presente dans le document
    """

    value: float = 0.0
    valid: bool = False

    @classmethod
    def of(cls, value: float) -> "NullFloat":
        """Construit une valeur presente."""
        return cls(value=value, valid=True)

    def as_optional(self) -> Optional[float]:
        """Retourne la valeur, ou None si absente."""
        return self.value if self.valid else None

    def __str__(self) -> str:
        return str(self.value) if self.valid else ""


NULL_INT = NullInt()
NULL_FLOAT = NullFloat()
