from PySide6.QtCore import QObject, Signal, Slot
from typing import Optional

from exam_submission.presentation.interfaces.protocols import ISubmissionStore
from exam_submission.submission_core.domain.events import FilePickRequested, NameChanged, SubmitRequested
from exam_submission.submission_core.domain.models import State

class MainViewModel(QObject):
    """
    ViewModel for the Main Window.
    Translates user interactions into events and republishes every new State.
    """

    # Signals to notify the View
    state_changed = Signal(object)

    def __init__(self, store: ISubmissionStore):
        super().__init__()
        self._store = store
        self._state = store.state
        self._unsubscribe = store.subscribe(self._on_state)

    @property
    def state(self) -> State:
        return self._state

    @property
    def can_submit(self) -> bool:
        # Resubmission stays possible after a failed attempt
        return self._state.ready_to_submit and not self._state.submitted

    @property
    def upload_label(self) -> Optional[str]:
        """Name of the picked file, or None if nothing was picked yet."""
        if self._state.file_to_submit is None:
            return None
        return self._state.file_to_submit.name

    def _on_state(self, state: State) -> None:
        if state != self._state:
            self._state = state
            self.state_changed.emit(state)

    @Slot(str)
    def set_user_name(self, name: str):
        self._store.dispatch(NameChanged(name))

    @Slot()
    def pick_file(self):
        self._store.dispatch(FilePickRequested())

    @Slot()
    def submit(self):
        """
        Ignores calls while submitting is not allowed (e.g. a stale click on a disabled button).
        """
        if not self.can_submit:
            return
        self._store.dispatch(SubmitRequested())

    def shutdown(self):
        self._unsubscribe()
