"""Text to Morse code conversion and back."""

from morse_translator.core.constants import (
    DECODE_SENTINEL,
    ENCODE_SENTINEL,
    WORD_SEPARATOR,
)
from morse_translator.core.table import DEFAULT_TABLE, MorseTable


def encode(text: str, table: MorseTable = DEFAULT_TABLE) -> str:
    """
    Convert text to space-separated Morse symbols.

    Spaces become the word separator ``/``. Characters without a mapping
    are replaced with ``?``; encoding never fails.
    """
    result: list[str] = []
    for char in text:
        symbol = table.symbol_for(char)
        if symbol is not None:
            result.append(symbol + ' ')
        else:
            result.append(ENCODE_SENTINEL + ' ')

    morse = ''.join(result)
    if morse.endswith(' '):
        morse = morse[:-1]
    return morse


def decode(morse: str, table: MorseTable = DEFAULT_TABLE) -> str:
    """
    Convert space-separated Morse symbols to text.

    ``/`` becomes a space and unknown symbols become ``#``. Runs of spaces
    between symbols are ignored.
    """
    result: list[str] = []
    for token in morse.strip().split(' '):
        if not token:
            continue
        if token == WORD_SEPARATOR:
            result.append(' ')
            continue
        char = table.char_for(token)
        result.append(char if char is not None else DECODE_SENTINEL)
    return ''.join(result)
