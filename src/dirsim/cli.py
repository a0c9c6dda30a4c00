"""dirsim command line entry point.

Usage: dirsim SCRIPT [OUTPUT]
"""

import logging
import sys

import click

from dirsim.config import RunConfig
from dirsim.exceptions import ScriptReadError
from dirsim.runner import ScriptRunner


@click.command()
@click.argument("script", type=click.Path(dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False), required=False)
def main(script: str, output: str | None) -> None:
    """Run the directory commands in SCRIPT and write the results to OUTPUT."""
    config = RunConfig.from_env(script, output)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        ScriptRunner().run(config)
    except ScriptReadError as e:
        click.echo(e.reason, err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Cannot write output file: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
