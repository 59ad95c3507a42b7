"""Shared constants for Morse translation."""

# Word boundary, in both directions
WORD_SEPARATOR = "/"

# Substituted for input with no mapping
ENCODE_SENTINEL = "?"
DECODE_SENTINEL = "#"

# International Morse code for the 26 letters
LETTERS: tuple[tuple[str, str], ...] = (
    ('A', ".-"), ('B', "-..."), ('C', "-.-."), ('D', "-.."), ('E', "."),
    ('F', "..-."), ('G', "--."), ('H', "...."), ('I', ".."), ('J', ".---"),
    ('K', "-.-"), ('L', ".-.."), ('M', "--"), ('N', "-."), ('O', "---"),
    ('P', ".--."), ('Q', "--.-"), ('R', ".-."), ('S', "..."), ('T', "-"),
    ('U', "..-"), ('V', "...-"), ('W', ".--"), ('X', "-..-"), ('Y', "-.--"),
    ('Z', "--.."),
)

DIGITS: tuple[tuple[str, str], ...] = (
    ('0', "-----"), ('1', ".----"), ('2', "..---"), ('3', "...--"),
    ('4', "....-"), ('5', "....."), ('6', "-...."), ('7', "--..."),
    ('8', "---.."), ('9', "----."),
)

# Brackets and braces share the parenthesis codes, backslash shares slash
PUNCTUATION: tuple[tuple[str, str], ...] = (
    (' ', WORD_SEPARATOR),
    (',', "--..--"), ('.', ".-.-.-"), ('?', "..--.."), (';', "-.-.-."),
    (':', "---..."), ('(', "-.--."), (')', "-.--.-"), ('[', "-.--."),
    (']', "-.--.-"), ('{', "-.--."), ('}', "-.--.-"), ('+', ".-.-."),
    ('-', "-....-"), ('_', "..--.-"), ('"', ".-..-."), ("'", ".----."),
    ('/', "-..-."), ('\\', "-..-."), ('@', ".--.-."), ('=', "-...-"),
    ('!', "-.-.--"),
)

# Insertion order decides reverse lookups: uppercase wins over lowercase,
# '(' over '[' and '{', '/' over '\'.
MORSE_ENTRIES: tuple[tuple[str, str], ...] = (
    LETTERS
    + tuple((char.lower(), symbol) for char, symbol in LETTERS)
    + DIGITS
    + PUNCTUATION
)
