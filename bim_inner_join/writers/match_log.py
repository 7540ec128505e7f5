"""Match output writers.

Output files:
- {prefix}_names_{k}.txt - names of matched variants from input k (1-based)
- {prefix}_matches.bim - one .bim record per matched locus
- {prefix}_mismatches.bim - reserved for mismatched loci
"""

from contextlib import ExitStack
from pathlib import Path
from types import TracebackType
from typing import TextIO

from bim_inner_join.models import Variant


class MatchLogger:
    """Manages all join outputs.

    Opens every output file on initialization. If any of them cannot be
    opened, the ones already opened are closed again and the OSError
    propagates. Implements the context manager protocol for cleanup.

    Usage:
        with MatchLogger(output_dir, n_streams=3) as logger:
            logger.record_name(0, "rs123")
            logger.record_match(variant)
    """

    def __init__(self, output_dir: Path, n_streams: int, prefix: str = "bij") -> None:
        """Initialize logger and open all output files.

        Args:
            output_dir: Directory for output files
            n_streams: Number of joined inputs (one names file each)
            prefix: Prefix for every output filename

        Raises:
            OSError: If an output file cannot be opened
        """
        self.output_dir = output_dir
        self.n_streams = n_streams
        self.prefix = prefix

        with ExitStack() as stack:
            self.names_files = [
                stack.enter_context(self._open(self.names_filename(i)))
                for i in range(n_streams)
            ]
            self.matches_file = stack.enter_context(self._open(self.matches_filename))
            self.mismatches_file = stack.enter_context(
                self._open(self.mismatches_filename)
            )
            self._stack = stack.pop_all()

        self.name_counts = [0] * n_streams
        self.match_count = 0
        self.mismatch_count = 0

    def names_filename(self, stream_index: int) -> str:
        """Filename of the names list for a 0-based stream index."""
        return f"{self.prefix}_names_{stream_index + 1}.txt"

    @property
    def matches_filename(self) -> str:
        return f"{self.prefix}_matches.bim"

    @property
    def mismatches_filename(self) -> str:
        return f"{self.prefix}_mismatches.bim"

    def _open(self, filename: str) -> TextIO:
        return open(self.output_dir / filename, "w", encoding="utf-8")

    def record_name(self, stream_index: int, name: str) -> None:
        """Append a matched variant name to the list of one input."""
        self.names_files[stream_index].write(f"{name}\n")
        self.name_counts[stream_index] += 1

    def record_match(self, variant: Variant) -> None:
        """Write the consolidated record of a matched locus."""
        self.matches_file.write(f"{variant.to_bim_line()}\n")
        self.match_count += 1

    def record_mismatch(self, variant: Variant) -> None:
        """Write the record of a locus whose alleles disagree."""
        self.mismatches_file.write(f"{variant.to_bim_line()}\n")
        self.mismatch_count += 1

    def close(self) -> None:
        """Close all file handles."""
        self._stack.close()

    def __enter__(self) -> "MatchLogger":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit - close all files."""
        self.close()

    def get_file_paths(self) -> dict[str, Path]:
        """Get paths to all output files.

        Returns:
            Dictionary mapping file type to path; names lists are keyed
            ``names_1`` .. ``names_N``
        """
        paths = {
            f"names_{i + 1}": self.output_dir / self.names_filename(i)
            for i in range(self.n_streams)
        }
        paths["matches"] = self.output_dir / self.matches_filename
        paths["mismatches"] = self.output_dir / self.mismatches_filename
        return paths

    def get_summary(self) -> dict[str, int]:
        """Get number of lines written per output file."""
        summary = {
            f"names_{i + 1}": count for i, count in enumerate(self.name_counts)
        }
        summary["matches"] = self.match_count
        summary["mismatches"] = self.mismatch_count
        return summary
