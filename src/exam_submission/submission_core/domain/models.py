import dataclasses
from typing import Generic, Optional, TypeVar, Union

from .messages import StatusMessages

T = TypeVar("T")
E = TypeVar("E")


@dataclasses.dataclass(frozen=True)
class FileSpec:
    """
    A file chosen by the user: its display name and full text contents.
    """
    name: str
    contents: str


@dataclasses.dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclasses.dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]


@dataclasses.dataclass(frozen=True)
class State:
    """
    Snapshot of the submission workflow.
    Never mutated: every transition builds a new instance with dataclasses.replace.
    """
    destination_path: str = ""
    status_text: str = StatusMessages.INITIAL
    user_name: Optional[str] = None
    file_to_submit: Optional[FileSpec] = None
    ready_to_submit: bool = False
    submitted: bool = False

    @property
    def has_inputs(self) -> bool:
        """True when both a user name and a file are present."""
        return self.user_name is not None and self.file_to_submit is not None
