import logging
from pathlib import Path
from typing import Annotated

import typer

from collectables.configurations import ConfigurationError, ScanConfigurations
from collectables.scan import bucket_by_length

app = typer.Typer()


def apply_settings(configurations: ScanConfigurations, settings: list[str]) -> None:
    for setting in settings:
        name, separator, value = setting.partition("=")
        if not separator:
            raise ConfigurationError(f"expected NAME=VALUE, not {setting!r}")
        configurations.set_value(name.strip(), value)


@app.command()
def main(
    paths: Annotated[list[Path], typer.Argument(help="Files and directories to scan.")],
    ordered: Annotated[bool, typer.Option("--ordered/--unordered")] = True,
    recursive: bool = True,
    follow_symlinks: bool = False,
    min_length: Annotated[int, typer.Option(min=0)] = 1,
    min_count: Annotated[int, typer.Option(min=1)] = 2,
    settings: Annotated[list[str] | None, typer.Option("--set", help="Override a setting as NAME=VALUE.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Group files by length and print the groups that may hold duplicates."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    configurations = ScanConfigurations(
        ordered=ordered,
        recursive=recursive,
        follow_symlinks=follow_symlinks,
        min_length=min_length,
        min_count=min_count,
    )
    try:
        apply_settings(configurations, settings or [])
    except ConfigurationError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2) from e

    path_set, errors = bucket_by_length(paths, configurations)

    for length, bucket in path_set.iter_duplicate_candidates(configurations.min_count):
        typer.echo(f"{length} bytes: {len(bucket)} files")
        for path in sorted(bucket):
            typer.echo(f"  {path}")

    if errors:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
