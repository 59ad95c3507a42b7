"""MorseTable - bidirectional character/symbol lookup."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from morse_translator.core.constants import MORSE_ENTRIES


@dataclass(frozen=True, slots=True)
class MorseTable:
    """
    Immutable mapping between characters and Morse symbols.

    ``forward`` maps each character to its symbol. ``reverse`` maps each
    symbol back to a single character; when several characters share a
    symbol, the one inserted first is kept.
    """
    forward: Mapping[str, str]
    reverse: Mapping[str, str]

    def symbol_for(self, char: str) -> str | None:
        """Return the Morse symbol for a character, or None if unmapped."""
        return self.forward.get(char)

    def char_for(self, symbol: str) -> str | None:
        """Return the character for a Morse symbol, or None if unknown."""
        return self.reverse.get(symbol)

    def __len__(self) -> int:
        return len(self.forward)

    def __contains__(self, char: object) -> bool:
        return char in self.forward


def build_table(entries: Iterable[tuple[str, str]]) -> MorseTable:
    """Build a MorseTable from ordered (char, symbol) pairs."""
    forward: dict[str, str] = {}
    for char, symbol in entries:
        forward[char] = symbol

    reverse: dict[str, str] = {}
    for char, symbol in forward.items():
        if symbol not in reverse:
            reverse[symbol] = char

    return MorseTable(
        forward=MappingProxyType(forward),
        reverse=MappingProxyType(reverse),
    )


# Built once at import, shared read-only
DEFAULT_TABLE: MorseTable = build_table(MORSE_ENTRIES)
