import asyncio
import structlog
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from ..application.naming import ARTIFACT_SUFFIX, build_submission_path
from ..domain.errors import SubmissionWriteError
from ..domain.models import FileSpec

logger = structlog.get_logger()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileExamWriter:
    """
    Writes each submission as a new text file in the destination directory.
    """
    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        suffix: str = ARTIFACT_SUFFIX,
        encoding: str = "utf-8",
    ):
        self._clock = clock
        self._suffix = suffix
        self._encoding = encoding

    async def write(self, destination_path: str, file: FileSpec, user_name: str) -> str:
        if not destination_path:
            raise SubmissionWriteError("Destination path is not configured")

        target = build_submission_path(destination_path, user_name, file.name, self._clock(), self._suffix)
        await asyncio.to_thread(self._write_file, target, file.contents)
        logger.info("submission_written", path=str(target), size=len(file.contents))
        return str(target)

    def _write_file(self, target: Path, contents: str) -> None:
        with open(target, "w", encoding=self._encoding, newline="") as f:
            f.write(contents)
            f.flush()
