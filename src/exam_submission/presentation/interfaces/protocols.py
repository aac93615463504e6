from typing import Callable, Protocol

from exam_submission.submission_core.domain.events import Event
from exam_submission.submission_core.domain.models import State

class ISubmissionStore(Protocol):
    """
    Interface the presentation layer uses to read state and send events.
    Decouples the ViewModel from the concrete dispatcher.
    """
    @property
    def state(self) -> State:
        """Current state snapshot."""
        ...

    def dispatch(self, event: Event) -> None:
        """Queues an event for the reducer."""
        ...

    def subscribe(self, listener: Callable[[State], None]) -> Callable[[], None]:
        """Registers a state listener; returns the unsubscribe function."""
        ...
