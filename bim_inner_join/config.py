"""Configuration dataclass for the bim inner join."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from bim_inner_join.models import ErrorKind, SetupError

MIN_INPUT_FILES = 2


@dataclass
class Config:
    """Configuration for one join run.

    Attributes:
        input_files: Sorted .bim files to join (at least two)
        output_dir: Output directory for generated files
        prefix: Prefix of every output filename
        verbose: Enable debug logging of each join step
    """

    input_files: list[Path] = field(default_factory=list)
    output_dir: Path | None = None
    prefix: str = "bij"
    verbose: bool = False

    def __post_init__(self) -> None:
        """Normalize paths and set defaults."""
        self.input_files = [Path(p) for p in self.input_files]

        # Set output_dir to current directory if not specified
        if self.output_dir is None:
            self.output_dir = Path.cwd()
        elif isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)

    @property
    def n_files(self) -> int:
        return len(self.input_files)

    def validate(self) -> list[SetupError]:
        """Validate configuration and return list of errors.

        Usage errors are reported alone, since the input files are not
        worth checking when there are too few of them.

        Returns:
            List of setup errors (empty if valid)
        """
        if self.n_files < MIN_INPUT_FILES:
            return [
                SetupError(
                    ErrorKind.USAGE,
                    f"At least {MIN_INPUT_FILES} input files are required, "
                    f"got {self.n_files}",
                )
            ]

        errors: list[SetupError] = []

        for path in self.input_files:
            if not path.is_file():
                errors.append(SetupError(ErrorKind.INPUT, f"Could not find file: {path}"))
            elif not os.access(path, os.R_OK):
                errors.append(SetupError(ErrorKind.INPUT, f"Could not read file: {path}"))

        assert self.output_dir is not None  # Set in __post_init__
        if not self.output_dir.is_dir():
            errors.append(
                SetupError(
                    ErrorKind.OUTPUT,
                    f"Output directory does not exist: {self.output_dir}",
                )
            )

        if not self.prefix or os.sep in self.prefix:
            errors.append(
                SetupError(ErrorKind.OUTPUT, f"Invalid output prefix: {self.prefix!r}")
            )

        return errors
