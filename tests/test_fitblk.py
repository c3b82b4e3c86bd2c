import io
import random
import sys
import zlib

import pytest

from zkit.fitblk import MIN_SIZE, fit_block, main


def _random_bytes(size, seed=7):
    return random.Random(seed).randbytes(size)


def _text(size):
    rng = random.Random(3)
    words = [b"alpha", b"beta", b"gamma", b"delta", b"epsilon", b"zeta", b"eta"]
    out = bytearray()
    while len(out) < size:
        out += rng.choice(words) + b" "
    return bytes(out[:size])


def test_small_input_fits_whole():
    data = b"hello, hello!" * 10
    result = fit_block(data, 200)
    assert result.all_input
    assert result.consumed == len(data)
    assert zlib.decompress(result.block) == data
    assert result.unused == 200 - len(result.block)


def test_size_below_minimum_rejected():
    with pytest.raises(ValueError):
        fit_block(b"data", MIN_SIZE - 1)


def test_minimum_size_empty_input():
    result = fit_block(b"", MIN_SIZE)
    assert result.all_input
    assert zlib.decompress(result.block) == b""
    assert len(result.block) <= MIN_SIZE


@pytest.mark.parametrize("size", [300, 1000, 4000])
def test_incompressible_input_is_fitted(size):
    data = _random_bytes(50000)
    result = fit_block(data, size)
    assert not result.all_input
    assert len(result.block) <= size
    assert zlib.decompress(result.block) == data[:result.consumed]
    assert result.consumed > 0


@pytest.mark.parametrize("size", [500, 2000])
def test_compressible_input_is_fitted(size):
    data = _text(200000)
    result = fit_block(data, size)
    assert not result.all_input
    assert len(result.block) <= size
    assert result.consumed > size
    assert zlib.decompress(result.block) == data[:result.consumed]


def test_shortfall_is_small_for_large_input():
    result = fit_block(_random_bytes(100000, seed=11), 2000)
    assert 0 <= result.unused < 64


def _patch_streams(monkeypatch, data):
    stdin = io.TextIOWrapper(io.BytesIO(data))
    stdout = io.TextIOWrapper(io.BytesIO())
    stderr = io.StringIO()
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    monkeypatch.setattr(sys, "stderr", stderr)
    return stdout, stderr


def test_main_requires_one_argument(monkeypatch):
    _, stderr = _patch_streams(monkeypatch, b"")
    assert main([]) == 1
    assert "fitblk abort: need one argument" in stderr.getvalue()


def test_main_rejects_non_number(monkeypatch):
    _, stderr = _patch_streams(monkeypatch, b"")
    assert main(["12x"]) == 1
    assert "argument must be a number" in stderr.getvalue()


def test_main_rejects_small_size(monkeypatch):
    _, stderr = _patch_streams(monkeypatch, b"")
    assert main(["7"]) == 1
    assert "need positive size of 8 or greater" in stderr.getvalue()


def test_main_writes_block(monkeypatch):
    data = _random_bytes(20000, seed=5)
    stdout, stderr = _patch_streams(monkeypatch, data)
    assert main(["1000"]) == 0
    stdout.flush()
    block = stdout.buffer.getvalue()
    assert len(block) <= 1000
    inflated = zlib.decompress(block)
    assert data.startswith(inflated)
    assert f"({len(inflated)} input)" in stderr.getvalue()


def test_main_reports_all_input(monkeypatch):
    data = b"hello, hello!"
    stdout, stderr = _patch_streams(monkeypatch, data)
    assert main(["100"]) == 0
    stdout.flush()
    assert zlib.decompress(stdout.buffer.getvalue()) == data
    assert "(all input)" in stderr.getvalue()