"""Core lookup tables for Morse translation."""

from morse_translator.core.table import DEFAULT_TABLE, MorseTable, build_table

__all__ = ["MorseTable", "build_table", "DEFAULT_TABLE"]
