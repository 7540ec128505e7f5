"""PLINK BIM file parser.

Streams variants one line at a time; inputs are never loaded whole.
Gzipped inputs are opened with io_utils.open_text.

BIM file format (tab/space-separated, no header):
chromosome  rsID  genetic_distance  position  allele1  allele2
1           rs123 0                 10000     A        G
"""

from pathlib import Path
from typing import IO

from bim_inner_join.models import Variant


def parse_bim_line(line: str, line_num: int | None = None) -> Variant:
    """Convert one .bim record into a Variant.

    The genetic distance column is read and discarded.

    Args:
        line: One line of a .bim file
        line_num: Line number, used in error messages

    Returns:
        Parsed Variant

    Raises:
        ValueError: If the line has fewer than 6 columns or a non-integer
            chromosome or position
    """
    parts = line.split()

    if len(parts) < 6:
        where = f" at line {line_num}" if line_num is not None else ""
        raise ValueError(
            f"Invalid BIM format{where}: expected 6 columns, got {len(parts)}"
        )

    return Variant(
        chromosome=int(parts[0]),
        name=parts[1],
        position=int(parts[3]),
        allele1=parts[4],
        allele2=parts[5],
    )


class BimStream:
    """Read-once cursor over an open .bim file.

    ``current`` holds the front variant of the stream. Once the file runs
    out, ``exhausted`` is set and ``current`` keeps its last value.

    Usage:
        with open_text(path) as handle:
            stream = BimStream(handle, source=path)
            while stream.advance():
                print(stream.current)
    """

    def __init__(self, handle: IO[str], source: Path | str | None = None) -> None:
        """Wrap an open text handle.

        Args:
            handle: Text handle positioned at the first record
            source: Where the records come from, for messages
        """
        self.handle = handle
        self.source = source
        self.current: Variant | None = None
        self.exhausted = False
        self.records_read = 0
        self._line_num = 0

    def advance(self) -> bool:
        """Read the next record into ``current``.

        Blank lines are skipped.

        Returns:
            True if a record was read, False at end of input
        """
        if self.exhausted:
            return False

        for line in self.handle:
            self._line_num += 1
            if not line.strip():
                continue
            try:
                self.current = parse_bim_line(line, self._line_num)
            except ValueError as e:
                raise ValueError(f"{self.source}: {e}") from e
            self.records_read += 1
            return True

        self.exhausted = True
        return False

    def __repr__(self) -> str:
        return (
            f"BimStream(source={self.source!r}, current={self.current}, "
            f"exhausted={self.exhausted})"
        )
