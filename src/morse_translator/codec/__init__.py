"""Encoding/decoding between text and Morse code."""

from morse_translator.codec.morse import decode, encode

__all__ = ["encode", "decode"]
