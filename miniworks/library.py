"""
Batch loading of stored MiniWorks patches.

Decodes many .syx files in one go. A file that cannot be read or that
holds invalid messages is reported and skipped; it never stops the
rest of the batch.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from miniworks.errors import MiniWorksError
from miniworks.formats.reader import MiniWorksReader
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class LibraryEntry:
    """A program and the file it came from."""

    source: Path
    program: Program


@dataclass
class LoadFailure:
    """A file, or a message inside a file, that was skipped."""

    source: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.source.name}: {self.reason}"


@dataclass
class LoadReport:
    """Result of a batch load."""

    entries: List[LibraryEntry] = field(default_factory=list)
    failures: List[LoadFailure] = field(default_factory=list)
    files_read: int = 0

    @property
    def programs(self) -> List[Program]:
        return [entry.program for entry in self.entries]

    @property
    def ok(self) -> bool:
        return not self.failures

    def __len__(self) -> int:
        return len(self.entries)


def load_programs(
    paths: Iterable[PathLike],
    mode: ChecksumMode = ChecksumMode.MASK7,
    device_id: Optional[int] = None,
) -> LoadReport:
    """
    Decode every program in a set of .syx files.

    All Dump files contribute their 20 programs; Program Dump files
    contribute one program per message.

    Args:
        paths: Files to read
        mode: Checksum algorithm
        device_id: Expected device ID, or None to accept any

    Returns:
        Loaded programs and skipped items
    """
    report = LoadReport()

    for path in paths:
        path = Path(path)
        try:
            contents = MiniWorksReader.read(path, mode, device_id)
        except (MiniWorksError, OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", path, e)
            report.failures.append(LoadFailure(path, str(e)))
            continue

        report.files_read += 1

        for failure in contents.errors:
            logger.warning("Skipping %s in %s", failure, path)
            report.failures.append(LoadFailure(path, str(failure)))

        programs = contents.all_programs
        if not programs and not contents.errors:
            logger.info("No programs in %s", path)

        report.entries.extend(LibraryEntry(path, program) for program in programs)

    logger.info(
        "Loaded %d programs from %d files (%d skipped)",
        len(report.entries),
        report.files_read,
        len(report.failures),
    )
    return report


def load_directory(
    directory: PathLike,
    mode: ChecksumMode = ChecksumMode.MASK7,
    device_id: Optional[int] = None,
    recursive: bool = False,
) -> LoadReport:
    """
    Decode every .syx file in a directory, in name order.

    Raises:
        NotADirectoryError: If the path is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    pattern = "**/*" if recursive else "*"
    paths = sorted(p for p in directory.glob(pattern) if p.is_file() and p.suffix.lower() == ".syx")
    return load_programs(paths, mode, device_id)
