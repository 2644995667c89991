"""Discovery of date-coded files within a directory."""

import logging
import os
from pathlib import Path

from filelist_streamer.datecode import DatecodeInput, extract_datecode, to_datecode
from filelist_streamer.exceptions import DirectoryListError

logger = logging.getLogger(__name__)


def list_files(
    directory: str | Path,
    min_datecode: DatecodeInput = None,
    max_datecode: DatecodeInput = None,
) -> list[str]:
    """
    List the files of ``directory`` whose date code lies within the bounds.

    Only the top level of the directory is inspected. Entries whose name does
    not start with a date code are skipped.

    Args:
        directory: Directory to list.
        min_datecode: Inclusive lower bound (default: unbounded).
        max_datecode: Inclusive upper bound (default: unbounded).

    Returns:
        list[str]: Absolute paths sorted by date code, then file name.

    Raises:
        DirectoryListError: If the directory cannot be listed.
    """
    dirname = os.path.abspath(directory)
    lower = to_datecode(min_datecode)
    upper = to_datecode(max_datecode)

    try:
        names = os.listdir(dirname)
    except OSError as e:
        logger.error("Cannot list directory %s: %s", dirname, e)
        raise DirectoryListError.from_os_error(e, dirname) from e

    entries: list[tuple[str, str]] = []
    for name in names:
        datecode = extract_datecode(name)
        if datecode is None:
            continue
        if lower is not None and datecode < lower:
            continue
        if upper is not None and datecode > upper:
            continue
        entries.append((datecode, name))

    entries.sort()

    logger.debug(
        "Listed %d of %d entries in %s (min=%s, max=%s)",
        len(entries),
        len(names),
        dirname,
        lower,
        upper,
    )
    return [os.path.join(dirname, name) for _, name in entries]
