"""
Enumerations with file-format discriminants

Babylon stores every selector as a number. Each enum member states its
discriminant literally, and may carry the label shown in the plugin UI:

    class FilterMode(FormatEnum):
        LOW_PASS = 0, 'Low Pass'
        BAND_PASS = 1, 'Band Pass'

Two lookup policies share the same value table:
- from_or (soft): unknown discriminants fall back to a default
- from_id (hard): unknown discriminants raise
"""

from enum import Enum
from typing import Optional, Type, TypeVar

from .errors import InvalidDataError

E = TypeVar('E', bound='FormatEnum')


class FormatEnum(Enum):

    def __new__(cls, discriminant: int, display_name: Optional[str] = None):
        member = object.__new__(cls)
        member._value_ = discriminant
        member._display_name = display_name
        return member

    @property
    def discriminant(self) -> int:
        return self._value_

    @property
    def display_name(self) -> str:
        if self._display_name:
            return self._display_name
        return self.name.replace('_', ' ').title()

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_or(cls: Type[E], discriminant: int, default: E) -> E:
        """Member with the given discriminant, or default if there is none"""
        try:
            return cls(discriminant)
        except ValueError:
            return default

    @classmethod
    def from_id(cls: Type[E], discriminant: int) -> E:
        """Member with the given discriminant; raises if there is none"""
        try:
            return cls(discriminant)
        except ValueError:
            raise cls._unknown_discriminant(discriminant) from None

    @classmethod
    def _unknown_discriminant(cls, discriminant: int) -> Exception:
        return InvalidDataError(f"Unknown {cls.__name__} ID {discriminant}")


def resolve_soft(enum_type: Type[E], discriminant: int, default: E) -> E:
    return enum_type.from_or(discriminant, default)


def resolve_hard(enum_type: Type[E], discriminant: int) -> E:
    return enum_type.from_id(discriminant)
