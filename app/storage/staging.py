import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from app.exceptions import CleanupWarning

logger = logging.getLogger(__name__)

STAGING_PREFIX = "relay-"
STAGING_SUFFIX = ".part"


class StagedFile:
    """Local copy of a downloaded file, owned by a single relay request."""

    def __init__(self, path: Path):
        self.path = path

    def open_for_write(self) -> BinaryIO:
        return open(self.path, "wb")

    def open_for_read(self) -> BinaryIO:
        return open(self.path, "rb")


def remove_staged_path(path: Path) -> bool:
    """Delete a staging path if it still exists.

    Returns False when deletion failed; the failure is logged, not raised.
    """
    try:
        if path.exists():
            path.unlink()
        return True
    except OSError as e:
        logger.warning(
            f"{CleanupWarning.__name__}: could not remove staging file {path}: {str(e)}"
        )
        return False


@contextmanager
def staged_file(staging_dir: str) -> Iterator[StagedFile]:
    """Allocate a unique staging path and remove it on every exit path."""
    directory = Path(staging_dir)
    directory.mkdir(parents=True, exist_ok=True)

    fd, name = tempfile.mkstemp(
        prefix=STAGING_PREFIX, suffix=STAGING_SUFFIX, dir=directory
    )
    os.close(fd)
    path = Path(name)
    logger.debug("Allocated staging file %s", path)

    try:
        yield StagedFile(path)
    finally:
        remove_staged_path(path)
