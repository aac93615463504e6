"""
Closed vocabulary of events that can change the workflow state.
"""
import dataclasses
from typing import Union

from .models import FileSpec, Result


@dataclasses.dataclass(frozen=True)
class ConfigLoaded:
    """The shared configuration file was read; `path` is the destination directory."""
    path: str


@dataclasses.dataclass(frozen=True)
class ConfigLoadFailed:
    message: str


@dataclasses.dataclass(frozen=True)
class NameChanged:
    name: str


@dataclasses.dataclass(frozen=True)
class FilePickRequested:
    pass


@dataclasses.dataclass(frozen=True)
class FilePicked:
    file: FileSpec


@dataclasses.dataclass(frozen=True)
class FilePickFailed:
    """The picker returned zero or several files, or the chosen file could not be read."""
    message: str


@dataclasses.dataclass(frozen=True)
class BecameReady:
    pass


@dataclasses.dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclasses.dataclass(frozen=True)
class SubmitCompleted:
    result: Result[str, str]


@dataclasses.dataclass(frozen=True)
class NoOp:
    pass


Event = Union[
    ConfigLoaded,
    ConfigLoadFailed,
    NameChanged,
    FilePickRequested,
    FilePicked,
    FilePickFailed,
    BecameReady,
    SubmitRequested,
    SubmitCompleted,
    NoOp,
]
