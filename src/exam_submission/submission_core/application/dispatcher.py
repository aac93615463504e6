import asyncio
import structlog
from typing import Callable, List, Optional, Set

from ..domain.effects import CheckReadiness, Effect, LoadConfig, SelectFile, WriteSubmission
from ..domain.errors import SelectionError, SubmissionWriteError
from ..domain.events import (
    ConfigLoaded,
    ConfigLoadFailed,
    Event,
    FilePicked,
    FilePickFailed,
    SubmitCompleted,
)
from ..domain.interfaces import ConfigLoader, ExamWriter, FileSelector
from ..domain.messages import StatusMessages
from ..domain.models import Err, Ok, State
from .reducer import readiness_event, reduce

logger = structlog.get_logger()

StateListener = Callable[[State], None]


class SubmissionStore:
    """
    Owns the current State and serializes every event through the reducer.

    Events are consumed one at a time from a single queue. Each event is processed
    to completion, including synchronously chained events such as the readiness
    check, before the next one is taken. Asynchronous effects run as tasks and
    report back only by queueing a follow-up event.
    """
    def __init__(
        self,
        config_loader: ConfigLoader,
        file_selector: FileSelector,
        exam_writer: ExamWriter,
        initial_state: Optional[State] = None,
    ):
        self._config_loader = config_loader
        self._file_selector = file_selector
        self._exam_writer = exam_writer
        self._state = initial_state if initial_state is not None else State()
        self._queue: asyncio.Queue = asyncio.Queue()
        self._listeners: List[StateListener] = []
        self._active_effects: Set[asyncio.Task] = set()
        self._running = False

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Registers a callback invoked with every new State.
        Returns a function that removes the callback.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> None:
        """Queues an event; it is reduced by the run loop."""
        self._queue.put_nowait(event)

    def start(self, effect: Optional[Effect]) -> None:
        """Launches the effect returned by reducer.init (typically LoadConfig)."""
        if effect is not None:
            self._run_effect(effect)

    async def run(self) -> None:
        """
        Main run loop: consumes the event queue until cancelled.
        """
        self._running = True
        logger.info("submission_store_started")

        while self._running:
            try:
                event = await self._queue.get()
                try:
                    self._process(event)
                finally:
                    self._queue.task_done()
            except asyncio.CancelledError:
                logger.info("submission_store_cancelled")
                self._running = False
                break

    async def wait_idle(self) -> None:
        """
        Waits until the queue is drained and no effect is in flight.
        """
        while True:
            await self._queue.join()
            if not self._active_effects:
                break
            await asyncio.gather(*list(self._active_effects), return_exceptions=True)

    def _process(self, event: Event) -> None:
        pending: Optional[Event] = event
        while pending is not None:
            logger.debug("event_dispatched", event_type=type(pending).__name__)
            self._state, effect = reduce(self._state, pending)
            self._notify()

            pending = None
            if isinstance(effect, CheckReadiness):
                pending = readiness_event(self._state)
            elif effect is not None:
                self._run_effect(effect)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                logger.error("state_listener_error", error=str(e), exc_info=True)

    def _run_effect(self, effect: Effect) -> None:
        logger.info("effect_started", effect_type=type(effect).__name__)
        task = asyncio.create_task(self._execute(effect))
        self._active_effects.add(task)
        task.add_done_callback(self._active_effects.discard)

    async def _execute(self, effect: Effect) -> None:
        self.dispatch(await self._outcome(effect))

    async def _outcome(self, effect: Effect) -> Event:
        """
        Runs one effect and converts its result or failure into exactly one event.
        """
        if isinstance(effect, LoadConfig):
            try:
                return ConfigLoaded(await self._config_loader.load(effect.path))
            except Exception as e:
                logger.error("config_load_failed", path=effect.path, error=str(e), exc_info=True)
                return ConfigLoadFailed(StatusMessages.CONFIG_LOAD_FAILED.format(e))

        if isinstance(effect, SelectFile):
            try:
                return FilePicked(await self._file_selector.select())
            except SelectionError as e:
                logger.warning("file_selection_rejected", count=e.count)
                return FilePickFailed(StatusMessages.SELECTION_FAILED)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("file_read_failed", error=str(e), exc_info=True)
                return FilePickFailed(StatusMessages.FILE_UNREADABLE)
            except Exception as e:
                logger.error("file_selection_failed", error=str(e), exc_info=True)
                return FilePickFailed(StatusMessages.SELECTION_FAILED)

        if isinstance(effect, WriteSubmission):
            try:
                if effect.user_name is None or effect.file is None:
                    raise SubmissionWriteError("Submission requires a user name and a file")
                path = await self._exam_writer.write(effect.destination_path, effect.file, effect.user_name)
                logger.info("submission_completed", path=str(path))
                return SubmitCompleted(Ok(StatusMessages.SUBMIT_SUCCEEDED))
            except Exception as e:
                logger.error("submission_failed", error=str(e), exc_info=True)
                return SubmitCompleted(Err(StatusMessages.SUBMIT_FAILED))

        raise TypeError(f"Unsupported effect: {effect!r}")
