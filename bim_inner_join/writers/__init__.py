"""Output writers for join results and run summaries."""

from bim_inner_join.writers.match_log import MatchLogger
from bim_inner_join.writers.summary import print_summary

__all__ = ["MatchLogger", "print_summary"]
