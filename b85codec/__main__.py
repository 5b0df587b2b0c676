import logging
import os
import sys

from typing import BinaryIO, Sequence

from .codec import decode, encode
from .error import DecodeError

LOGGER = logging.getLogger(__name__)


def wrap_lines(text: str, width: int) -> str:
    return "\n".join(text[pos : pos + width] for pos in range(0, len(text), width))


def main(
    args: Sequence[str], stdin: BinaryIO = None, stdout: BinaryIO = None
) -> None:
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout.buffer
    if not args:
        raise SystemExit("Missing required arguments (action)")
    action = args[0]
    if action == "encode":
        width = 0
        if len(args) > 1:
            if args[1] != "--wrap" or len(args) != 3:
                raise SystemExit("Usage: encode [--wrap N]")
            try:
                width = int(args[2])
            except ValueError:
                raise SystemExit(f"Invalid wrap width: {args[2]}") from None
            if width < 1:
                raise SystemExit(f"Invalid wrap width: {width}")
        text = encode(stdin.read())
        if width:
            text = wrap_lines(text, width)
        stdout.write(text.encode("ascii") + b"\n")
    elif action == "decode":
        if len(args) > 1:
            raise SystemExit("Usage: decode")
        try:
            data = decode(stdin.read())
        except DecodeError as ex:
            raise SystemExit(f"Invalid input: {ex}") from None
        LOGGER.debug("decoded %d bytes", len(data))
        stdout.write(data)
    else:
        raise SystemExit(f"Unsupported action {action}")
    stdout.flush()


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("B85CODEC_LOG", "WARNING").upper())
    main(sys.argv[1:])
