import pytest
from unittest.mock import MagicMock
from exam_submission.presentation.viewmodels.main_vm import MainViewModel
from exam_submission.presentation.interfaces.protocols import ISubmissionStore
from exam_submission.submission_core.domain.events import FilePickRequested, NameChanged, SubmitRequested
from exam_submission.submission_core.domain.models import FileSpec, State

@pytest.fixture
def mock_store():
    store = MagicMock(spec=ISubmissionStore)
    store.state = State()
    return store

@pytest.fixture
def viewModel(mock_store):
    return MainViewModel(mock_store)

def publish(mock_store, state):
    """Invoke the listener the ViewModel registered on the store."""
    listener = mock_store.subscribe.call_args[0][0]
    listener(state)

def test_initial_state_comes_from_store(viewModel):
    assert viewModel.state == State()
    assert viewModel.can_submit is False
    assert viewModel.upload_label is None

def test_set_user_name_dispatches(viewModel, mock_store):
    viewModel.set_user_name("Alice")
    mock_store.dispatch.assert_called_once_with(NameChanged("Alice"))

def test_pick_file_dispatches(viewModel, mock_store):
    viewModel.pick_file()
    mock_store.dispatch.assert_called_once_with(FilePickRequested())

def test_submit_ignored_until_ready(viewModel, mock_store):
    viewModel.submit()
    mock_store.dispatch.assert_not_called()

def test_submit_dispatches_when_ready(viewModel, mock_store):
    publish(mock_store, State(user_name="Alice", file_to_submit=FileSpec("hw1.py", ""), ready_to_submit=True))

    viewModel.submit()

    mock_store.dispatch.assert_called_once_with(SubmitRequested())

def test_submit_disabled_after_success(viewModel, mock_store):
    publish(mock_store, State(ready_to_submit=True, submitted=True))
    assert viewModel.can_submit is False

def test_state_change_emits_signal(viewModel, mock_store):
    received = []
    viewModel.state_changed.connect(received.append)
    new_state = State(file_to_submit=FileSpec("hw1.py", "print(1)"))

    publish(mock_store, new_state)

    assert received == [new_state]
    assert viewModel.upload_label == "hw1.py"

def test_identical_state_is_not_re_emitted(viewModel, mock_store):
    received = []
    viewModel.state_changed.connect(received.append)

    publish(mock_store, State())

    assert received == []

def test_shutdown_unsubscribes(viewModel, mock_store):
    unsubscribe = mock_store.subscribe.return_value
    viewModel.shutdown()
    unsubscribe.assert_called_once()
