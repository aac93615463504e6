"""
Descriptions of the side effects the reducer asks the dispatcher to run.
"""
import dataclasses
from typing import Optional, Union

from .models import FileSpec


@dataclasses.dataclass(frozen=True)
class LoadConfig:
    path: str


@dataclasses.dataclass(frozen=True)
class CheckReadiness:
    """Synchronous: resolved in the same dispatch step as the event that produced it."""
    pass


@dataclasses.dataclass(frozen=True)
class SelectFile:
    pass


@dataclasses.dataclass(frozen=True)
class WriteSubmission:
    """Snapshot of the state fields the writer needs, taken at submit time."""
    destination_path: str
    user_name: Optional[str]
    file: Optional[FileSpec]


Effect = Union[LoadConfig, CheckReadiness, SelectFile, WriteSubmission]
