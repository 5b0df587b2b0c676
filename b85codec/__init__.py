from .alphabet import ALPHABET, symbol_for, value_for
from .codec import decode, encode
from .error import B85Error, DecodeError, InvalidLength, InvalidSymbol, Overflow

__all__ = (
    "ALPHABET",
    "B85Error",
    "DecodeError",
    "InvalidLength",
    "InvalidSymbol",
    "Overflow",
    "decode",
    "encode",
    "symbol_for",
    "value_for",
)
