"""Pytest fixtures for bim_inner_join tests."""

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from bim_inner_join.parsers.bim import BimStream

BimRecord = tuple[int, str, float, int, str, str]


def bim_text(records: list[BimRecord]) -> str:
    """Render records as tab-separated .bim lines."""
    return "".join("\t".join(str(field) for field in r) + "\n" for r in records)


@pytest.fixture
def make_streams() -> Callable[..., list[BimStream]]:
    """Factory building in-memory BimStreams, one per list of records."""

    def _make(*inputs: list[BimRecord]) -> list[BimStream]:
        return [
            BimStream(io.StringIO(bim_text(records)), source=f"input{i + 1}")
            for i, records in enumerate(inputs)
        ]

    return _make


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty output directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def sample_files(tmp_path: Path) -> dict[str, Path]:
    """Three sorted .bim files sharing two loci.

    Test cases:
    - chr1:100 in all files, A/G vs G/A vs A/0 -> match
    - chr1:150 only in a and c -> skipped
    - chr1:200 in all files, C/T vs C/T vs G/T -> allele mismatch
    - chr2:50 in all files, 0/0 vs T/C vs 0/0 -> match, record from b
    - chr3:10 only in b -> skipped
    """
    a = tmp_path / "a.bim"
    a.write_text(
        "1\trs100a\t0\t100\tA\tG\n"
        "1\trs150a\t0\t150\tA\tC\n"
        "1\trs200a\t0\t200\tC\tT\n"
        "2\trs50a\t0\t50\t0\t0\n"
    )
    b = tmp_path / "b.bim"
    b.write_text(
        "1\trs100b\t0.5\t100\tG\tA\n"
        "1\trs200b\t0\t200\tC\tT\n"
        "2\trs50b\t0\t50\tT\tC\n"
        "3\trs10b\t0\t10\tA\tG\n"
    )
    c = tmp_path / "c.bim"
    c.write_text(
        "1 rs100c 0 100 A 0\n"
        "1 rs150c 0 150 A C\n"
        "1 rs200c 0 200 G T\n"
        "2 rs50c 0 50 0 0\n"
    )
    out = tmp_path / "out"
    out.mkdir()
    return {"a": a, "b": b, "c": c, "dir": out}
