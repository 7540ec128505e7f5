"""Tests for the .bim parser and stream cursor."""

import gzip
import io
from pathlib import Path

import pytest

from bim_inner_join.io_utils import open_text
from bim_inner_join.parsers.bim import BimStream, parse_bim_line


class TestParseBimLine:
    """Tests for single-record parsing."""

    def test_tab_separated(self) -> None:
        variant = parse_bim_line("1\trs123\t0\t10000\tA\tG\n")

        assert variant.chromosome == 1
        assert variant.name == "rs123"
        assert variant.position == 10000
        assert variant.allele1 == "A"
        assert variant.allele2 == "G"

    def test_space_separated(self) -> None:
        variant = parse_bim_line("22  rs9   0.25   51000   0   T")

        assert variant.chromosome == 22
        assert variant.position == 51000
        assert variant.allele1 == "0"
        assert variant.allele2 == "T"

    def test_genetic_distance_discarded(self) -> None:
        """Lines differing only in genetic distance give the same variant."""
        assert parse_bim_line("1 rs1 0 100 A G") == parse_bim_line("1 rs1 1.5 100 A G")

    def test_too_few_columns(self) -> None:
        with pytest.raises(ValueError, match="expected 6 columns"):
            parse_bim_line("1\trs123\t0\t10000", line_num=7)

    def test_line_number_in_message(self) -> None:
        with pytest.raises(ValueError, match="line 7"):
            parse_bim_line("1\trs123", line_num=7)

    def test_non_numeric_chromosome(self) -> None:
        with pytest.raises(ValueError):
            parse_bim_line("X\trs1\t0\t100\tA\tG")


class TestBimStream:
    """Tests for the read-once stream cursor."""

    def test_advance_through_records(self) -> None:
        stream = BimStream(io.StringIO("1 rs1 0 1 A G\n1 rs2 0 2 C T\n"))

        assert stream.current is None
        assert stream.advance() is True
        assert stream.current.name == "rs1"
        assert stream.advance() is True
        assert stream.current.name == "rs2"
        assert stream.records_read == 2
        assert stream.exhausted is False

    def test_exhausted_keeps_last_record(self) -> None:
        """Reading past the end flags the stream and leaves current stale."""
        stream = BimStream(io.StringIO("1 rs1 0 1 A G\n"))
        stream.advance()

        assert stream.advance() is False
        assert stream.exhausted is True
        assert stream.current.name == "rs1"
        assert stream.advance() is False

    def test_last_line_without_newline(self) -> None:
        """A final record without a trailing newline is still read."""
        stream = BimStream(io.StringIO("1 rs1 0 1 A G\n1 rs2 0 2 A G"))

        assert stream.advance() and stream.advance()
        assert stream.current.name == "rs2"
        assert stream.exhausted is False

    def test_empty_input(self) -> None:
        stream = BimStream(io.StringIO(""))

        assert stream.advance() is False
        assert stream.exhausted is True
        assert stream.current is None

    def test_malformed_record_names_source(self) -> None:
        stream = BimStream(io.StringIO("1 rs1 0 1 A G\n1 rs2\n"), source="study.bim")
        stream.advance()

        with pytest.raises(ValueError, match="study.bim.*line 2"):
            stream.advance()

    def test_skips_blank_lines(self) -> None:
        """Blank lines are skipped but still counted for line numbers."""
        stream = BimStream(io.StringIO("1 rs1 0 1 A G\n\n  \n1 rs2 0 2 A G\n1 rs3\n"))

        assert stream.advance() and stream.advance()
        assert stream.current.name == "rs2"
        assert stream.records_read == 2
        with pytest.raises(ValueError, match="line 5"):
            stream.advance()

    def test_gzipped_file(self, tmp_path: Path) -> None:
        bim_file = tmp_path / "test.bim.gz"
        with gzip.open(bim_file, "wt") as f:
            f.write("1\trs1\t0\t1\tA\tG\n2\trs2\t0\t5\tC\tT\n")

        with open_text(bim_file) as handle:
            stream = BimStream(handle, source=bim_file)
            names = []
            while stream.advance():
                names.append(stream.current.name)

        assert names == ["rs1", "rs2"]
        assert stream.exhausted
