from typing import Protocol

from .models import FileSpec


class ConfigLoader(Protocol):
    """
    Reads the shared configuration file holding the submission destination.
    """
    async def load(self, path: str) -> str:
        """
        Returns the destination directory stored at `path`.
        Raises OSError (or a subclass) if the file cannot be read.
        """
        ...


class FileSelector(Protocol):
    """
    Prompts the user to choose the file to submit.
    """
    async def select(self) -> FileSpec:
        """
        Returns the chosen file.
        Raises SelectionError if zero or several files were chosen.
        """
        ...


class ExamWriter(Protocol):
    """
    Persists a submission to durable storage. Write-Only (ISP).
    """
    async def write(self, destination_path: str, file: FileSpec, user_name: str) -> str:
        """
        Writes the file contents under a derived name and returns the path written.
        """
        ...
