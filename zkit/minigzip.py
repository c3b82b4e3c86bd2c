"""A small gzip-compatible compressor and decompressor."""

from __future__ import annotations

import gzip
import os
import sys
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Union

BUFLEN = 16384
GZ_SUFFIX = ".gz"
SUFFIX_LEN = len(GZ_SUFFIX)
MAX_NAME_LEN = 1024
DEFAULT_LEVEL = 6

_GZIP_WBITS = 31
_MEM_LEVEL = 8
_STRATEGIES = {
    "f": zlib.Z_FILTERED,
    "h": zlib.Z_HUFFMAN_ONLY,
    "R": zlib.Z_RLE,
}

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Options:
    """Settings taken from the command line."""

    copyout: bool = False
    uncompress: bool = False
    level: int = DEFAULT_LEVEL
    strategy: str = ""
    files: list[str] = field(default_factory=list)

    @property
    def mode(self) -> str:
        """The gzip open mode for writing, such as ``wb6`` or ``wb9f``."""
        return f"wb{self.level}{self.strategy}"


def parse_args(argv: Sequence[str], prog: str = "minigzip") -> Options:
    """Parse options; the first argument that is not an option starts the files.

    A program named ``gunzip`` decompresses, one named ``zcat`` decompresses
    to standard output.
    """
    options = Options()
    name = prog.rsplit("/", 1)[-1]
    if name == "gunzip":
        options.uncompress = True
    elif name == "zcat":
        options.copyout = options.uncompress = True

    args = list(argv)
    position = 0
    for arg in args:
        if arg == "-c":
            options.copyout = True
        elif arg == "-d":
            options.uncompress = True
        elif arg == "-f":
            options.strategy = "f"
        elif arg == "-h":
            options.strategy = "h"
        elif arg == "-r":
            options.strategy = "R"
        elif len(arg) == 2 and arg[0] == "-" and arg[1] in "123456789":
            options.level = int(arg[1])
        else:
            break
        position += 1
    options.files = args[position:]
    return options


def _settings(mode: str) -> tuple[int, int]:
    level = zlib.Z_DEFAULT_COMPRESSION
    strategy = zlib.Z_DEFAULT_STRATEGY
    for char in mode:
        if char.isdigit():
            level = int(char)
        elif char in _STRATEGIES:
            strategy = _STRATEGIES[char]
    return level, strategy


def gz_compress(source: BinaryIO, target: BinaryIO, mode: str = "wb") -> int:
    """Write ``source`` to ``target`` as one gzip member; return bytes read.

    The level and strategy are taken from ``mode`` as for opening a gzip file.
    """
    level, strategy = _settings(mode)
    deflater = zlib.compressobj(level, zlib.DEFLATED, _GZIP_WBITS, _MEM_LEVEL, strategy)
    total = 0
    while chunk := source.read(BUFLEN):
        target.write(deflater.compress(chunk))
        total += len(chunk)
    target.write(deflater.flush())
    return total


def gz_uncompress(source: BinaryIO, target: BinaryIO) -> int:
    """Decompress all gzip members in ``source`` into ``target``; return bytes written."""
    total = 0
    with gzip.GzipFile(fileobj=source, mode="rb") as stream:
        while chunk := stream.read(BUFLEN):
            target.write(chunk)
            total += len(chunk)
    return total


def _check_length(name: str) -> None:
    if len(name) + len(GZ_SUFFIX) >= MAX_NAME_LEN + 1:
        raise ValueError("filename too long")


def file_compress(path: PathLike, mode: str = "wb6") -> Path:
    """Compress ``path`` into ``path.gz``, remove the original, return the new path."""
    name = os.fspath(path)
    _check_length(name)
    outfile = name + GZ_SUFFIX
    with open(name, "rb") as source, open(outfile, "wb") as target:
        gz_compress(source, target, mode)
    os.unlink(name)
    return Path(outfile)


def file_uncompress(path: PathLike) -> Path:
    """Decompress a ``.gz`` file, remove it, and return the restored path.

    A name without the suffix names the output; the input then has it added.
    """
    name = os.fspath(path)
    _check_length(name)
    if len(name) > SUFFIX_LEN and name.endswith(GZ_SUFFIX):
        infile, outfile = name, name[:-SUFFIX_LEN]
    else:
        infile, outfile = name + GZ_SUFFIX, name
    with open(infile, "rb") as source:
        with open(outfile, "wb") as target:
            gz_uncompress(source, target)
    os.unlink(infile)
    return Path(outfile)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress or decompress files, or standard input to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "minigzip"
    options = parse_args(args, prog)
    stdin = sys.stdin.buffer
    stdout = sys.stdout.buffer
    try:
        if not options.files:
            if options.uncompress:
                gz_uncompress(stdin, stdout)
            else:
                gz_compress(stdin, stdout, options.mode)
        for name in options.files:
            if options.uncompress and options.copyout:
                try:
                    source = open(name, "rb")
                except OSError:
                    print(f"{prog}: can't gzopen {name}", file=sys.stderr)
                    continue
                with source:
                    gz_uncompress(source, stdout)
            elif options.uncompress:
                file_uncompress(name)
            elif options.copyout:
                try:
                    source = open(name, "rb")
                except OSError as exc:
                    print(f"{name}: {exc.strerror}", file=sys.stderr)
                    continue
                with source:
                    gz_compress(source, stdout, options.mode)
            else:
                file_compress(name, options.mode)
        stdout.flush()
    except (OSError, EOFError, ValueError, zlib.error) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    return 0