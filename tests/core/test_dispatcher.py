import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

from exam_submission.submission_core.application.dispatcher import SubmissionStore
from exam_submission.submission_core.application.reducer import init
from exam_submission.submission_core.domain.errors import SelectionError
from exam_submission.submission_core.domain.events import (
    FilePicked,
    FilePickRequested,
    NameChanged,
    SubmitRequested,
)
from exam_submission.submission_core.domain.messages import StatusMessages
from exam_submission.submission_core.domain.models import FileSpec, State

HW1 = FileSpec(name="hw1.py", contents="print(1)")

@pytest.fixture
def mock_loader():
    loader = MagicMock()
    loader.load = AsyncMock(return_value="/srv/exams")
    return loader

@pytest.fixture
def mock_selector():
    selector = MagicMock()
    selector.select = AsyncMock(return_value=HW1)
    return selector

@pytest.fixture
def mock_writer():
    writer = MagicMock()
    writer.write = AsyncMock(return_value="/srv/exams/x.txt")
    return writer

@pytest.fixture
def store(mock_loader, mock_selector, mock_writer):
    return SubmissionStore(mock_loader, mock_selector, mock_writer)

async def run_until_idle(store, *events, effect=None):
    task = asyncio.create_task(store.run())
    try:
        store.start(effect)
        for event in events:
            store.dispatch(event)
        await store.wait_idle()
    finally:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

@pytest.mark.asyncio
async def test_initial_config_load(store, mock_loader):
    _, effect = init("/shared/submission.conf")
    await run_until_idle(store, effect=effect)

    mock_loader.load.assert_awaited_once_with("/shared/submission.conf")
    assert store.state.destination_path == "/srv/exams"

@pytest.mark.asyncio
async def test_config_load_failure_becomes_status(store, mock_loader):
    mock_loader.load.side_effect = FileNotFoundError("no such file")
    _, effect = init("/missing.conf")
    await run_until_idle(store, effect=effect)

    assert store.state.destination_path == ""
    assert store.state.status_text == StatusMessages.CONFIG_LOAD_FAILED.format("no such file")

@pytest.mark.asyncio
async def test_readiness_check_is_chained_in_same_step(store):
    seen = []
    store.subscribe(seen.append)

    await run_until_idle(store, NameChanged("Alice"), FilePicked(HW1))

    # NameChanged, NoOp, FilePicked, BecameReady
    assert len(seen) == 4
    assert seen[1].ready_to_submit is False
    assert seen[2].ready_to_submit is False
    assert seen[3].ready_to_submit is True
    assert store.state.status_text == StatusMessages.READY

@pytest.mark.asyncio
async def test_file_pick_runs_selector(store, mock_selector):
    await run_until_idle(store, NameChanged("Alice"), FilePickRequested())

    mock_selector.select.assert_awaited_once()
    assert store.state.file_to_submit == HW1
    assert store.state.ready_to_submit is True

@pytest.mark.asyncio
async def test_selection_failure_becomes_status(store, mock_selector):
    mock_selector.select.side_effect = SelectionError(2)
    await run_until_idle(store, FilePickRequested())

    assert store.state.file_to_submit is None
    assert store.state.status_text == StatusMessages.SELECTION_FAILED

@pytest.mark.asyncio
async def test_unreadable_selection_becomes_status(store, mock_selector):
    mock_selector.select.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    await run_until_idle(store, FilePickRequested())

    assert store.state.status_text == StatusMessages.FILE_UNREADABLE

@pytest.mark.asyncio
async def test_submit_success(mock_loader, mock_selector, mock_writer):
    store = SubmissionStore(mock_loader, mock_selector, mock_writer, State(destination_path="/srv/exams"))
    await run_until_idle(store, NameChanged("Alice"), FilePicked(HW1), SubmitRequested())

    mock_writer.write.assert_awaited_once_with("/srv/exams", HW1, "Alice")
    assert store.state.submitted is True
    assert store.state.status_text == StatusMessages.SUBMIT_SUCCEEDED

@pytest.mark.asyncio
async def test_submit_failure_keeps_ready(mock_loader, mock_selector, mock_writer):
    mock_writer.write.side_effect = PermissionError("denied")
    store = SubmissionStore(mock_loader, mock_selector, mock_writer, State(destination_path="/srv/exams"))
    await run_until_idle(store, NameChanged("Alice"), FilePicked(HW1), SubmitRequested())

    assert store.state.submitted is False
    assert store.state.ready_to_submit is True
    assert store.state.status_text == StatusMessages.SUBMIT_FAILED

@pytest.mark.asyncio
async def test_submit_without_inputs_fails_without_writing(store, mock_writer):
    await run_until_idle(store, SubmitRequested())

    mock_writer.write.assert_not_awaited()
    assert store.state.submitted is False
    assert store.state.status_text == StatusMessages.SUBMIT_FAILED

@pytest.mark.asyncio
async def test_listener_errors_do_not_stop_processing(store):
    store.subscribe(MagicMock(side_effect=RuntimeError("render failed")))
    await run_until_idle(store, NameChanged("Alice"))

    assert store.state.user_name == "Alice"

@pytest.mark.asyncio
async def test_unsubscribe_stops_notifications(store):
    listener = MagicMock()
    unsubscribe = store.subscribe(listener)
    unsubscribe()
    await run_until_idle(store, NameChanged("Alice"))

    listener.assert_not_called()

@pytest.mark.asyncio
async def test_missing_selected_file_becomes_unreadable_status(store, mock_selector):
    mock_selector.select.side_effect = FileNotFoundError("gone")
    await run_until_idle(store, FilePickRequested())

    assert store.state.status_text == StatusMessages.FILE_UNREADABLE

def test_unsubscribe_twice_is_harmless(store):
    listener = MagicMock()
    unsubscribe = store.subscribe(listener)
    unsubscribe()
    unsubscribe()
