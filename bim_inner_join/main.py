"""Main orchestration for the bim inner join.

Opens every input and output under a single ExitStack so that all handles
are released whichever way the run ends.
"""

import logging
from contextlib import ExitStack

from rich.console import Console

from bim_inner_join.config import Config
from bim_inner_join.engine import MergeJoinEngine
from bim_inner_join.io_utils import open_text
from bim_inner_join.models import Statistics
from bim_inner_join.parsers.bim import BimStream
from bim_inner_join.writers.match_log import MatchLogger
from bim_inner_join.writers.summary import print_summary

logger = logging.getLogger(__name__)


def run_join(config: Config, console: Console | None = None) -> Statistics:
    """Join the configured inputs and write the match files.

    Steps:
    1. Open every input file
    2. Open the output files
    3. Run the merge-join until one input runs out
    4. Print a summary

    Args:
        config: Validated configuration
        console: Console for user-facing output

    Returns:
        Statistics for the run

    Raises:
        OSError: If an input or output file cannot be opened
        ValueError: If an input contains a malformed record
    """
    console = console or Console()
    assert config.output_dir is not None  # Set in Config.__post_init__

    with ExitStack() as stack:
        streams = []
        for path in config.input_files:
            console.print(f"Opening: {path}")
            handle = stack.enter_context(open_text(path))
            streams.append(BimStream(handle, source=path))

        match_logger = stack.enter_context(
            MatchLogger(config.output_dir, len(streams), prefix=config.prefix)
        )

        engine = MergeJoinEngine(streams, match_logger)
        stats = engine.run()

        output_files = match_logger.get_file_paths()
        line_counts = match_logger.get_summary()

    for path, read in zip(config.input_files, stats.records_read):
        logger.debug("%s: %d variants read", path, read)

    print_summary(stats, config.input_files, console)

    console.print("\n[bold]Output files generated:[/bold]")
    for name, path in output_files.items():
        console.print(f"  {name:<12} {line_counts[name]:>10,} lines  {path}")

    return stats
