"""
morse-translator: text to Morse code and back

Translate text to International Morse code and back, from Python, the
command line, or over HTTP.

Quick Start:
    >>> import morse_translator as morse
    >>> morse.encode("SOS")
    '... --- ...'
    >>> morse.decode(".... .. / - .... . .-. .")
    'HI THERE'

Features:
    - Letters, digits and common punctuation, with '/' between words
    - Unknown input becomes '?' (encoding) or '#' (decoding), never an error
    - FastAPI service with text-to-morse and morse-to-text routes
    - Typer CLI for one-off translation and running the server
"""

__version__ = "0.1.0"

# Lookup table
from morse_translator.core.table import DEFAULT_TABLE, MorseTable, build_table

# Translation
from morse_translator.codec.morse import decode, encode

__all__ = [
    # Version
    "__version__",
    # Table
    "MorseTable",
    "build_table",
    "DEFAULT_TABLE",
    # Translation
    "encode",
    "decode",
]
