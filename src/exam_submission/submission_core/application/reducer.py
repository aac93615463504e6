"""
Pure transition function of the submission workflow.

`reduce(state, event)` returns the next state and, optionally, the effect the
dispatcher should run next. It performs no I/O and never raises for a member
of the Event union.
"""
import dataclasses
from typing import Optional, Tuple

from ..domain.effects import CheckReadiness, Effect, LoadConfig, SelectFile, WriteSubmission
from ..domain.events import (
    BecameReady,
    ConfigLoaded,
    ConfigLoadFailed,
    Event,
    FilePicked,
    FilePickFailed,
    FilePickRequested,
    NameChanged,
    NoOp,
    SubmitCompleted,
    SubmitRequested,
)
from ..domain.messages import StatusMessages
from ..domain.models import Err, Ok, State

Transition = Tuple[State, Optional[Effect]]


def init(config_path: str) -> Transition:
    """Initial state plus the effect that loads the destination directory."""
    return State(), LoadConfig(path=config_path)


def readiness_event(state: State) -> Event:
    """Follow-up event of the readiness check."""
    if state.has_inputs:
        return BecameReady()
    return NoOp()


def _with_inputs(state: State, **changes) -> State:
    new_state = dataclasses.replace(state, **changes)
    # Readiness only rises through BecameReady, but drops as soon as an input is missing
    if not new_state.has_inputs and new_state.ready_to_submit:
        new_state = dataclasses.replace(new_state, ready_to_submit=False)
    return new_state


def reduce(state: State, event: Event) -> Transition:
    match event:
        case ConfigLoaded(path=path):
            return dataclasses.replace(state, destination_path=path), None

        case ConfigLoadFailed(message=message):
            return dataclasses.replace(state, status_text=message), None

        case NameChanged(name=""):
            status = StatusMessages.INPUT_FILE if state.file_to_submit is not None else StatusMessages.INITIAL
            return _with_inputs(state, user_name=None, status_text=status), CheckReadiness()

        case NameChanged(name=name):
            return _with_inputs(state, user_name=name, status_text=StatusMessages.INPUT_FILE), CheckReadiness()

        case FilePickRequested():
            return state, SelectFile()

        case FilePicked(file=file):
            return _with_inputs(state, file_to_submit=file, status_text=StatusMessages.INPUT_NAME), CheckReadiness()

        case FilePickFailed(message=message):
            return dataclasses.replace(state, status_text=message), None

        case BecameReady() if state.has_inputs:
            return dataclasses.replace(state, ready_to_submit=True, status_text=StatusMessages.READY), None

        case BecameReady():
            # Stale readiness: an input was cleared since the check
            return state, None

        case SubmitRequested():
            return state, WriteSubmission(
                destination_path=state.destination_path,
                user_name=state.user_name,
                file=state.file_to_submit,
            )

        case SubmitCompleted(result=Ok(value=message)):
            return dataclasses.replace(state, submitted=True, status_text=message), None

        case SubmitCompleted(result=Err(error=message)):
            return dataclasses.replace(state, submitted=False, status_text=message), None

        case NoOp():
            return state, None

        case _:
            raise TypeError(f"Unsupported event: {event!r}")
