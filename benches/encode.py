"""
Times the encoder and decoder over 1 MiB of random data.
"""

import os
import timeit

from b85codec import decode, encode

ROUNDS = 5


def bench(name: str, func, arg):
    best = min(timeit.repeat(lambda: func(arg), number=1, repeat=ROUNDS))
    print(f"{name}: {best * 1000:.1f} ms ({len(arg) / best / 2**20:.1f} MiB/s)")


if __name__ == "__main__":
    testdata = os.urandom(0x100000)
    encoded = encode(testdata)
    bench("encoder", encode, testdata)
    bench("decoder", decode, encoded)
