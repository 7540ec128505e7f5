"""Data models for the bim inner join.

Variants are compared by locus only: the (chromosome, position) pair. Names
and alleles never take part in the ordering.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

# PLINK writes "0" for an allele that was never called (monomorphic site)
MISSING_ALLELE = "0"


class Ordering(Enum):
    """Result of comparing two loci."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class ErrorKind(Enum):
    """Kinds of problems detected before the join starts."""

    USAGE = auto()
    INPUT = auto()
    OUTPUT = auto()


@dataclass(frozen=True, slots=True)
class SetupError:
    """A problem found while validating the run configuration.

    Attributes:
        kind: Which part of the setup failed
        message: Human-readable description
    """

    kind: ErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class Variant:
    """Variant from a PLINK .bim file.

    Attributes:
        chromosome: Numeric chromosome code
        name: Variant identifier (unique within its file only)
        position: Base pair position
        allele1: First allele ("0" if not called)
        allele2: Second allele ("0" if not called)
    """

    chromosome: int
    name: str
    position: int
    allele1: str
    allele2: str

    @property
    def locus(self) -> tuple[int, int]:
        """The (chromosome, position) pair used for ordering."""
        return self.chromosome, self.position

    @property
    def has_both_alleles(self) -> bool:
        """True if neither allele is the missing-allele sentinel."""
        return self.allele1 != MISSING_ALLELE and self.allele2 != MISSING_ALLELE

    def called_alleles(self) -> set[str]:
        """Alleles of this variant, without the missing-allele sentinel."""
        return {a for a in (self.allele1, self.allele2) if a != MISSING_ALLELE}

    def to_bim_line(self) -> str:
        """Format as a tab-separated .bim record (genetic distance written as 0)."""
        return (
            f"{self.chromosome}\t{self.name}\t0\t{self.position}"
            f"\t{self.allele1}\t{self.allele2}"
        )

    def __str__(self) -> str:
        return (
            f"<Variant {self.name} chr{self.chromosome}:{self.position}, "
            f"[{self.allele1}, {self.allele2}]>"
        )


def compare(a: Variant, b: Variant) -> Ordering:
    """Compare two variants by (chromosome, position).

    Example:
        >>> compare(Variant(1, "rs1", 100, "A", "G"), Variant(2, "rs2", 5, "C", "T"))
        <Ordering.LESS: -1>
    """
    if a.locus < b.locus:
        return Ordering.LESS
    if a.locus > b.locus:
        return Ordering.GREATER
    return Ordering.EQUAL


def locus_equal(a: Variant, b: Variant) -> bool:
    """True if both variants sit on the same chromosome and position."""
    return a.locus == b.locus


def alleles_compatible(a: Variant, b: Variant) -> bool:
    """Check whether two variants can describe the same biallelic site.

    Monomorphic calls carry a "0" allele, so A/0 is consistent with G/A
    while A/0 and T/G are not. The called alleles of both sides are pooled
    and the pair is compatible if at most two distinct values remain.

    Only meaningful for variants at the same locus; the locus itself is
    not checked here.

    Args:
        a: First variant
        b: Second variant

    Returns:
        True if the union of called alleles has at most 2 elements
    """
    return len(a.called_alleles() | b.called_alleles()) <= 2


def argmax(variants: Sequence[Variant]) -> int:
    """Index of the variant with the greatest locus.

    Ties go to the first occurrence.

    Raises:
        ValueError: If the sequence is empty
    """
    if not variants:
        raise ValueError("argmax() of an empty sequence")

    greatest = 0
    for i in range(1, len(variants)):
        if compare(variants[i], variants[greatest]) is Ordering.GREATER:
            greatest = i
    return greatest


@dataclass
class Statistics:
    """Running counters for one join."""

    steps: int = 0
    matches: int = 0
    mismatched_loci: int = 0
    records_read: list[int] = field(default_factory=list)

    @property
    def total_records(self) -> int:
        """Records read across all inputs."""
        return sum(self.records_read)
