"""Typing session - keystroke evaluation and statistics for one chunk"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from repotyper.models.chunk import Chunk
from repotyper.models.config import TypingSettings
from repotyper.models.project import SourceFile
from repotyper.models.session import SessionState, SessionStatus, SpecialKey, Statistics


logger = logging.getLogger(__name__)

Key = Union[str, SpecialKey]
Clock = Callable[[], float]

CHARS_PER_WORD = 5
AUTO_INDENT_CHARS = (" ", "\t")


@dataclass(frozen=True)
class KeyResult:
    """Outcome of evaluating one keystroke"""
    state: SessionState
    completed: bool = False


def new_session() -> SessionState:
    """A session that has not started"""
    return SessionState()


def begin(state: SessionState, now: float) -> SessionState:
    """Start the clock. Ignored unless the session has not started."""
    if state.status != SessionStatus.NOT_STARTED:
        return state
    return state.model_copy(update={"start_time": now})


def reset() -> SessionState:
    """Clear all progress, from any state"""
    return new_session()


def key_matches(key: Key, expected: str) -> bool:
    """Whether a keystroke satisfies the expected character"""
    if key == SpecialKey.TAB:
        return expected == "\t"
    if key == SpecialKey.ENTER:
        return expected == "\n"
    return key == expected


def evaluate(
    state: SessionState,
    content: str,
    key: Key,
    stop_on_error: bool,
    now: float,
) -> KeyResult:
    """Apply one keystroke to an active session.

    Args:
        state: Current session state
        content: The chunk text being typed
        key: A literal character or a SpecialKey signal
        stop_on_error: When set, a mismatch leaves the cursor in place
        now: Current clock reading

    Returns:
        KeyResult whose `completed` flag is set on the keystroke that
        finishes the chunk
    """
    if not state.active:
        return KeyResult(state)

    if state.cursor >= len(content):
        return KeyResult(_complete(state, now), completed=True)

    cursor = state.cursor
    correct = state.correct_count
    errors = state.error_count
    error_positions = state.error_positions

    if key_matches(key, content[cursor]):
        cursor += 1
        correct += 1
        if key == SpecialKey.ENTER:
            # Leading whitespace of the next line is typed for the user
            while cursor < len(content) and content[cursor] in AUTO_INDENT_CHARS:
                cursor += 1
                correct += 1
    else:
        errors += 1
        error_positions = error_positions | {cursor}
        if not stop_on_error:
            cursor += 1

    state = state.model_copy(update={
        "cursor": cursor,
        "correct_count": correct,
        "error_count": errors,
        "error_positions": error_positions,
    })

    if cursor >= len(content):
        return KeyResult(_complete(state, now), completed=True)
    return KeyResult(state)


def compute_statistics(state: SessionState, content: str, now: float) -> Statistics:
    """Derive WPM, accuracy and progress from a session"""
    if state.start_time is None:
        elapsed = 0.0
    else:
        end = state.end_time if state.end_time is not None else now
        elapsed = max(0.0, end - state.start_time)

    wpm = 0
    if elapsed > 0:
        wpm = round_half_up((state.correct_count / CHARS_PER_WORD) / (elapsed / 60))

    attempts = state.correct_count + state.error_count
    accuracy = 100
    if attempts > 0:
        accuracy = round_half_up(state.correct_count / attempts * 100)

    progress = 0
    if content:
        progress = round_half_up(min(state.cursor, len(content)) / len(content) * 100)

    return Statistics(
        wpm=wpm,
        accuracy=accuracy,
        progress=progress,
        total_chars=len(content),
        typed_chars=state.cursor,
        correct_chars=state.correct_count,
        errors=state.error_count,
        elapsed_seconds=elapsed,
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero"""
    return int(math.floor(value + 0.5))


def _complete(state: SessionState, now: float) -> SessionState:
    return state.model_copy(update={"end_time": now})


class TypingSession:
    """Mutable holder for the session over one chunk.

    Settings are read on every keystroke, so toggling stop-on-error takes
    effect immediately.
    """

    def __init__(
        self,
        chunk: Chunk,
        settings: TypingSettings,
        clock: Clock = time.monotonic,
        on_complete: Optional[Callable[[Chunk], None]] = None,
    ):
        self.chunk = chunk
        self.settings = settings
        self.clock = clock
        self.on_complete = on_complete
        self.state = new_session()

    @property
    def content(self) -> str:
        return self.chunk.content

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    def begin(self) -> None:
        self.state = begin(self.state, self.clock())

    def press(self, key: Key) -> bool:
        """Feed one keystroke; the first keystroke starts the session.

        Returns:
            True if this keystroke completed the chunk
        """
        if self.state.status == SessionStatus.NOT_STARTED:
            self.begin()

        result = evaluate(
            self.state,
            self.content,
            key,
            self.settings.stop_on_error,
            self.clock(),
        )
        self.state = result.state

        if result.completed:
            logger.debug("Completed %s with %d error(s)", self.chunk.id, self.state.error_count)
            if self.on_complete is not None:
                self.on_complete(self.chunk)
        return result.completed

    def reset(self) -> None:
        self.state = reset()

    def statistics(self) -> Statistics:
        return compute_statistics(self.state, self.content, self.clock())


class PracticeController:
    """Drives practice over one file: chunk selection and the live session.

    Changing the selected chunk always replaces the session with a fresh one.
    """

    def __init__(
        self,
        source_file: SourceFile,
        settings: TypingSettings,
        clock: Clock = time.monotonic,
        on_chunk_complete: Optional[Callable[[SourceFile, Chunk], None]] = None,
    ):
        self.source_file = source_file
        self.settings = settings
        self.clock = clock
        self.on_chunk_complete = on_chunk_complete
        self.chunk_index = 0
        self.session: Optional[TypingSession] = None
        self.select_chunk(0)

    @property
    def chunk(self) -> Optional[Chunk]:
        return self.source_file.get_chunk(self.chunk_index)

    @property
    def chunk_count(self) -> int:
        return len(self.source_file.chunks)

    @property
    def has_next_chunk(self) -> bool:
        return self.chunk_index < self.chunk_count - 1

    @property
    def has_prev_chunk(self) -> bool:
        return self.chunk_index > 0

    def select_chunk(self, index: int) -> bool:
        """Switch to the chunk at index, discarding the current session"""
        chunk = self.source_file.get_chunk(index)
        if chunk is None:
            return False
        self.chunk_index = index
        self.session = TypingSession(
            chunk,
            self.settings,
            clock=self.clock,
            on_complete=self._handle_complete,
        )
        return True

    def next_chunk(self) -> bool:
        if not self.has_next_chunk:
            return False
        return self.select_chunk(self.chunk_index + 1)

    def prev_chunk(self) -> bool:
        if not self.has_prev_chunk:
            return False
        return self.select_chunk(self.chunk_index - 1)

    def press(self, key: Key) -> bool:
        """Feed a keystroke to the current session"""
        if self.session is None:
            return False
        return self.session.press(key)

    def reset(self) -> None:
        if self.session is not None:
            self.session.reset()

    def statistics(self) -> Statistics:
        if self.session is None:
            return Statistics()
        return self.session.statistics()

    def toggle_stop_on_error(self) -> bool:
        self.settings.stop_on_error = not self.settings.stop_on_error
        return self.settings.stop_on_error

    def _handle_complete(self, chunk: Chunk) -> None:
        self.source_file.mark_chunk_completed(chunk.id)
        logger.info(
            "Chunk %s of %s completed (%d/%d)",
            chunk.id,
            self.source_file.path,
            *self.source_file.get_progress(),
        )
        if self.on_chunk_complete is not None:
            self.on_chunk_complete(self.source_file, chunk)
