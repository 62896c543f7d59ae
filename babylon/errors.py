"""
Errors raised while decoding Babylon presets

Only two things stop a decode: a container that can't be read at all,
and an effect order that can't be rebuilt. Everything else falls back to
a default.
"""


class DecodeError(Exception):
    """Base class for every error the decoder raises"""


class InvalidDataError(DecodeError, ValueError):
    """The preset container is malformed or missing required attributes"""


class UnknownEffectType(InvalidDataError):
    """An effect order slot holds an ID that is not a known effect type"""

    def __init__(self, effect_type_id: int):
        self.effect_type_id = effect_type_id
        super().__init__(f"Unknown effect type ID {effect_type_id}")
