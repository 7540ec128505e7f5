"""Parsers for PLINK .bim variant files."""

from bim_inner_join.parsers.bim import BimStream, parse_bim_line

__all__ = ["BimStream", "parse_bim_line"]
