from typing import Optional, Union

# RFC 1924 ordering; a symbol's index is its digit value
ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    "!#$%&()*+-;<=>?@^_`{|}~"
)
BASE = len(ALPHABET)

MAP_ENCODE = ALPHABET.encode("ascii")
MAP_DECODE = {c: idx for (idx, c) in enumerate(ALPHABET)}


def symbol_for(value: int) -> str:
    if not 0 <= value < BASE:
        raise ValueError(f"digit out of range: {value}")
    return ALPHABET[value]


def value_for(symbol: Union[str, int]) -> Optional[int]:
    """Return the digit value of `symbol`, or None if it is not in the alphabet.

    Accepts either a one-character string or a byte value.
    """
    if isinstance(symbol, int):
        if not 0 <= symbol < 128:
            return None
        symbol = chr(symbol)
    return MAP_DECODE.get(symbol)
