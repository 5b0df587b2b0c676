import io

import pytest

from b85codec.__main__ import main, wrap_lines


def run(args, data: bytes) -> bytes:
    stdout = io.BytesIO()
    main(args, io.BytesIO(data), stdout)
    return stdout.getvalue()


def test_encode():
    assert run(["encode"], b"\xff" * 4) == b"|NsC0\n"


def test_encode_wrapped():
    data = bytes(range(40))
    out = run(["encode", "--wrap", "16"], data)
    lines = out.decode("ascii").splitlines()
    assert [len(line) for line in lines] == [16, 16, 16, 2]
    assert run(["decode"], out) == data


def test_decode():
    assert run(["decode"], b"K>\n") == b"A"


def test_decode_invalid():
    with pytest.raises(SystemExit) as exc:
        run(["decode"], b"K>\"\n")
    assert "Invalid input" in str(exc.value)


@pytest.mark.parametrize(
    "args", [[], ["compress"], ["encode", "--wrap"], ["encode", "--wrap", "0"], ["encode", "--wrap", "x"], ["decode", "extra"]]
)
def test_bad_arguments(args):
    with pytest.raises(SystemExit):
        run(args, b"")


def test_wrap_lines():
    assert wrap_lines("abcdefg", 3) == "abc\ndef\ng"
    assert wrap_lines("", 3) == ""
