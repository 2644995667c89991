"""Command-line interface for streaming date-coded files."""

import logging
from pathlib import Path
import sys

import typer

from filelist_streamer.exceptions import DirectoryListError, FileOpenError, FileReadError
from filelist_streamer.reader import FileListReader
from filelist_streamer.sources.local import DEFAULT_CHUNK_SIZE

app = typer.Typer(add_completion=False)


@app.command()
def main(
    directory: str = typer.Argument(
        ...,
        help="Directory containing YYYYMMDD_<name> files",
    ),
    min_datecode: str | None = typer.Option(
        None,
        help="Inclusive lower date code bound, e.g. 20140215",
    ),
    max_datecode: str | None = typer.Option(
        None,
        help="Inclusive upper date code bound, e.g. 20140216",
    ),
    output: str | None = typer.Option(
        None,
        help="Output file path (default: stdout)",
    ),
    list_only: bool = typer.Option(
        False,
        "--list",
        help="Only print the matching file paths",
    ),
    chunk_size: int = typer.Option(
        DEFAULT_CHUNK_SIZE,
        min=1,
        help="Read chunk size in bytes",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Concatenate the files of DIRECTORY in date code order.

    Only files named <YYYYMMDD>_<rest> are considered.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        if list_only:
            for path in FileListReader.get_list_of_files(directory, min_datecode, max_datecode):
                typer.echo(path)
            return

        with FileListReader(
            directory,
            min_datecode=min_datecode,
            max_datecode=max_datecode,
            chunk_size=chunk_size,
        ) as reader:
            if output:
                with Path(output).open("wb") as f:
                    for chunk in reader.get_stream():
                        f.write(chunk)
                typer.echo(f"Output written to: {output}", err=True)
            else:
                for chunk in reader.get_stream():
                    sys.stdout.buffer.write(chunk)
                sys.stdout.buffer.flush()

    except DirectoryListError as e:
        typer.echo(f"Error: Cannot list directory: {e}", err=True)
        raise typer.Exit(code=1) from None
    except (FileOpenError, FileReadError) as e:
        typer.echo(f"Error: Cannot read file: {e}", err=True)
        raise typer.Exit(code=1) from None
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        if verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        raise typer.Exit(code=1) from None


if __name__ == "__main__":
    app()
