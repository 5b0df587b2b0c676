import logging
import struct

from typing import Union

from .alphabet import BASE, MAP_DECODE, MAP_ENCODE
from .error import InvalidLength, InvalidSymbol, Overflow

LOGGER = logging.getLogger(__name__)

MAX_WORD = 0xFFFFFFFF
# short groups decode as if completed with the highest digit
PAD_DIGIT = BASE - 1
WHITESPACE = frozenset(" \t\n\r")


def encode(data: Union[bytes, str]) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)
    padding = -len(data) % 4
    buf = bytearray((len(data) + padding) * 5 // 4)
    idx = 4
    for (val,) in struct.iter_unpack(">L", data + bytes(padding)):
        for _ in range(4):
            buf[idx] = MAP_ENCODE[val % BASE]
            idx -= 1
            val //= BASE
        buf[idx] = MAP_ENCODE[val]
        idx += 9
    if padding:
        # each zero byte of padding costs exactly one trailing digit
        del buf[len(buf) - padding :]
    return buf.decode("ascii")


def decode(text: Union[str, bytes]) -> bytes:
    """Decode RFC 1924 Base85 `text` into bytes.

    ASCII whitespace may appear anywhere and is ignored. Raises InvalidSymbol,
    InvalidLength or Overflow (all DecodeError) for malformed input, in which
    case nothing is returned.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        # one character per byte keeps reported positions aligned with the input
        text = bytes(text).decode("latin-1")
    buf = bytearray()
    count = 0
    start = 0
    val = 0
    for pos, char in enumerate(text):
        if char in WHITESPACE:
            continue
        digit = MAP_DECODE.get(char)
        if digit is None:
            LOGGER.debug("rejecting symbol %r at position %d", char, pos)
            raise InvalidSymbol(char, pos)
        if count % 5 == 0:
            start = pos
            val = 0
        val = val * BASE + digit
        count += 1
        if count % 5 == 0:
            if val > MAX_WORD:
                LOGGER.debug("group at position %d overflows: %d", start, val)
                raise Overflow(start, val)
            buf += val.to_bytes(4, "big")

    tail = count % 5
    if tail == 1:
        LOGGER.debug("rejecting %d symbols: single trailing symbol", count)
        raise InvalidLength(count)
    if tail:
        for _ in range(5 - tail):
            val = val * BASE + PAD_DIGIT
        if val > MAX_WORD:
            LOGGER.debug("final group at position %d overflows: %d", start, val)
            raise Overflow(start, val)
        buf += val.to_bytes(4, "big")[: tail - 1]
    return bytes(buf)
