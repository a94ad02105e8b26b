# arch-decoder - prefix code message decoding
# archive.py
# 10/18/26

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

ARCHIVE_SUFFIX = ".arch"

_BIT_LINE = re.compile(r"[01]+")


class ArchiveError(ValueError):
    pass


@dataclass
class Archive:
    path: Path
    shape: str  # pre-order tree shape, lines joined with "\n"
    bits: str   # the encoded message


def split_archive(text: str) -> Tuple[str, str]:
    """
    Split archive text into (shape, bits)

    The shape may span several lines because a newline can itself be a leaf.
    Line breaks are only kept once the shape has content, so leading blank
    lines are dropped. The first line made only of 0s and 1s is the message;
    anything after it is ignored.
    """
    shape = ""
    for line in text.split("\n"):
        if _BIT_LINE.fullmatch(line):
            return shape, line
        if shape:
            shape += "\n"
        shape += line

    raise ArchiveError("archive has no bit message line")


def read_archive(path: Union[str, Path]) -> Archive:
    p = Path(path)
    if not p.name.endswith(ARCHIVE_SUFFIX):
        raise ArchiveError(f"File '{p}' is the wrong file type. It must have a {ARCHIVE_SUFFIX} extension.")
    if not p.is_file():
        raise FileNotFoundError(f"File '{p}' does not exist.")

    with p.open("r", encoding="utf-8") as f: # universal newlines: \r\n and \r become \n
        try:
            text = f.read()
        except UnicodeDecodeError as exc:
            raise ArchiveError(f"File '{p}' is not valid UTF-8 text: {exc}") from exc

    shape, bits = split_archive(text)
    return Archive(path=p, shape=shape, bits=bits)
