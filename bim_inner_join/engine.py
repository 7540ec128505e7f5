"""Multi-way merge-join over sorted .bim streams.

Every input is read through a BimStream positioned on its current variant.
Each step either records a locus shared by all inputs or pulls the lagging
streams forward toward the furthest one. The join ends as soon as any
stream runs out.
"""

import logging
from collections.abc import Sequence
from enum import Enum, auto

from bim_inner_join.models import (
    Ordering,
    Statistics,
    Variant,
    alleles_compatible,
    argmax,
    compare,
    locus_equal,
)
from bim_inner_join.parsers.bim import BimStream
from bim_inner_join.writers.match_log import MatchLogger

logger = logging.getLogger(__name__)


class RunState(Enum):
    """State of a join run."""

    ACTIVE = auto()  # every stream has a current variant
    DONE = auto()  # at least one stream reached end of input


class CursorSet:
    """Current front variant of each input stream, indexed 0..N-1."""

    def __init__(self, streams: Sequence[BimStream]) -> None:
        if len(streams) < 2:
            raise ValueError(f"At least two streams are required, got {len(streams)}")
        self.streams = list(streams)

    def __len__(self) -> int:
        return len(self.streams)

    def __getitem__(self, index: int) -> Variant:
        variant = self.streams[index].current
        if variant is None:
            raise LookupError(f"Stream {index} has not been read yet")
        return variant

    def variants(self) -> list[Variant]:
        return [self[i] for i in range(len(self))]

    def any_exhausted(self) -> bool:
        return any(s.exhausted for s in self.streams)

    def advance(self, index: int) -> bool:
        """Advance one stream unless it already reached end of input."""
        stream = self.streams[index]
        if stream.exhausted:
            return False
        return stream.advance()

    def advance_all(self) -> None:
        for i in range(len(self)):
            self.advance(i)

    def __repr__(self) -> str:
        return ", ".join(str(s.current) for s in self.streams)


class MergeJoinEngine:
    """Drives a CursorSet to the loci shared by every input.

    Usage:
        with MatchLogger(output_dir, len(streams)) as match_logger:
            stats = MergeJoinEngine(streams, match_logger).run()
    """

    def __init__(
        self,
        streams: Sequence[BimStream],
        match_logger: MatchLogger,
        stats: Statistics | None = None,
    ) -> None:
        self.cursors = CursorSet(streams)
        self.match_logger = match_logger
        self.stats = stats if stats is not None else Statistics()
        self.primed = False

    @property
    def state(self) -> RunState:
        if self.cursors.any_exhausted():
            return RunState.DONE
        return RunState.ACTIVE

    def prime(self) -> None:
        """Read the first variant of every stream."""
        self.cursors.advance_all()
        self.primed = True
        self._update_counts()

    def is_full_match(self) -> bool:
        """True if every cursor sits on the first cursor's locus with compatible alleles."""
        first = self.cursors[0]
        for i in range(1, len(self.cursors)):
            other = self.cursors[i]
            if not locus_equal(first, other) or not alleles_compatible(first, other):
                return False
        return True

    def step(self) -> bool:
        """Run one join step on the current cursors.

        Returns:
            True if the current locus matched across all inputs
        """
        self.stats.steps += 1
        logger.debug("Now: %r", self.cursors)

        if self.is_full_match():
            self._record_match()
            self.cursors.advance_all()
            self._update_counts()
            return True

        variants = self.cursors.variants()
        furthest = variants[argmax(variants)]
        logger.debug("Maximum: %s", furthest)

        lagging = [
            i for i, v in enumerate(variants)
            if compare(v, furthest) is Ordering.LESS
        ]
        if lagging:
            for i in lagging:
                self.cursors.advance(i)
        else:
            # Every cursor is on the same locus but the alleles disagree
            logger.debug("Allele mismatch at %s", furthest)
            self.stats.mismatched_loci += 1
            self.cursors.advance_all()

        self._update_counts()
        return False

    def run(self) -> Statistics:
        """Step until any stream reaches end of input.

        Returns:
            Statistics for the run
        """
        if not self.primed:
            self.prime()

        while self.state is RunState.ACTIVE:
            self.step()

        logger.debug(
            "Join finished after %d steps with %d matches",
            self.stats.steps,
            self.stats.matches,
        )
        return self.stats

    def _record_match(self) -> None:
        variants = self.cursors.variants()
        for i, variant in enumerate(variants):
            self.match_logger.record_name(i, variant.name)

        # Prefer a record where both alleles are called
        chosen = next((v for v in variants if v.has_both_alleles), variants[0])
        self.match_logger.record_match(chosen)
        self.stats.matches += 1

    def _update_counts(self) -> None:
        self.stats.records_read = [s.records_read for s in self.cursors.streams]
