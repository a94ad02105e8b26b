import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest


# root -> (^ -> a, b), (^ -> c, (^ -> d, newline))
SAMPLE_SHAPE = "^^ab^c^d\n"
SAMPLE_TABLE = [("a", "00"), ("b", "01"), ("c", "10"), ("d", "110"), ("\n", "111")]


@pytest.fixture
def sample_shape():
    return SAMPLE_SHAPE


@pytest.fixture
def sample_table():
    return list(SAMPLE_TABLE)


@pytest.fixture
def write_archive(tmp_path):
    def _write(text, name="message.arch"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
