"""
Script runner for dirsim.

Reads a script, feeds it line by line through the parser and executor, and
hands every output block to a single OutputWriter in program order. The
writer appends to the output file and mirrors each block to stdout.
"""

import logging
import time
from collections.abc import Iterable
from pathlib import Path

import click

from dirsim.commands.parser import CommandParser
from dirsim.config import RunConfig
from dirsim.core.types import OutputBlock
from dirsim.exceptions import CommandParseError, ScriptReadError
from dirsim.execution.executor import CommandExecutor
from dirsim.execution.session import Session

logger = logging.getLogger(__name__)


def read_script(path: Path) -> list[str]:
    """
    Load a script and split it into raw lines.

    Params:
        path: Location of the script

    Returns:
        The lines of the script, split on newlines and not yet stripped

    Raises:
        ScriptReadError: When the file is missing or cannot be decoded
    """
    if not path.is_file():
        raise ScriptReadError(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptReadError(str(path), f"Cannot read input file: {e}") from e
    return text.split("\n")


class OutputWriter:
    """
    Sequential writer for output blocks.

    Blocks are separated by a single newline in the file, with no newline
    after the last one. The file is truncated when the writer is opened.
    """

    def __init__(self, path: Path, echo: bool = True):
        self.path = path
        self.echo = echo
        self.blocks_written = 0
        self._handle = None

    def __enter__(self) -> "OutputWriter":
        self._handle = open(self.path, "w", encoding="utf-8", newline="")
        self.blocks_written = 0
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._handle.close()
        self._handle = None

    def write(self, block: OutputBlock) -> None:
        if self.blocks_written:
            self._handle.write("\n")
        self._handle.write(block)
        self.blocks_written += 1
        if self.echo:
            click.echo(block)


class ScriptRunner:
    """Runs script lines against one session."""

    def __init__(self, session: Session | None = None):
        self.session = session if session is not None else Session()
        self.parser = CommandParser()
        self.executor = CommandExecutor(self.session)

    def run_line(self, raw_line: str) -> list[OutputBlock]:
        """
        Parse and execute a single script line.

        Returns:
            The parse failure message, or the echo and result blocks
        """
        line = raw_line.strip()
        try:
            command = self.parser.parse(line)
        except CommandParseError as e:
            logger.debug("Rejected %r: %s", line, e.reason.value)
            return [str(e)]
        return self.executor.execute(command)

    def run_lines(
        self, lines: Iterable[str], writer: OutputWriter | None = None
    ) -> list[OutputBlock]:
        """
        Run lines in order, writing each block as soon as it is produced.

        Params:
            lines: Raw script lines
            writer: Optional sink for the blocks

        Returns:
            Every block produced, in program order
        """
        blocks = []
        for raw_line in lines:
            for block in self.run_line(raw_line):
                blocks.append(block)
                if writer is not None:
                    writer.write(block)
        return blocks

    def run(self, config: RunConfig) -> list[OutputBlock]:
        """
        Execute the script named by config.

        The script is read before the output file is touched, so a missing
        script leaves no output behind.

        Raises:
            ScriptReadError: When the script cannot be loaded
        """
        lines = read_script(config.script_path)
        output_path = config.resolved_output_path

        logger.info("Starting run for job %s: %s -> %s", config.job_id, config.script_path, output_path)
        started = time.perf_counter()

        with OutputWriter(output_path, echo=config.echo) as writer:
            blocks = self.run_lines(lines, writer)

        elapsed = time.perf_counter() - started
        logger.info("Finished job %s: %d lines in %.3fs", config.job_id, len(lines), elapsed)
        return blocks


def run_script(script_path: Path | str, output_path: Path | str | None = None) -> list[OutputBlock]:
    """
    Convenience function to run a script in a fresh session.

    Params:
        script_path: Script to execute
        output_path: Output file; generated from the job id when omitted

    Returns:
        The blocks written to the output
    """
    return ScriptRunner().run(RunConfig.from_env(script_path, output_path))
