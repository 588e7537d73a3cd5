"""Character layer for strict markup parsing.

Provides the forward-only cursor that every grammar rule reads through.
"""

from .cursor import CharacterCursor, CharPredicate, is_name_char, is_whitespace

__all__ = [
    "CharacterCursor",
    "CharPredicate",
    "is_name_char",
    "is_whitespace",
]
