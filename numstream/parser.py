"""
Number Parser - Incremental JSON number parser using the state machine pattern.

Feed the parser chunks of input as they arrive; it suspends whenever a chunk
runs out and resumes exactly where it left off on the next call. An empty
chunk marks the end of the stream.

    parser = NumberParser()
    for chunk in chunks:
        pos = parser.feed(chunk)
        if parser.is_complete:
            break          # chunk[pos:] belongs to whatever comes next
    else:
        parser.finalise()
"""

import logging
from typing import Optional, Tuple, Union

from .buffers import MantissaBuffer, ExponentBuffer
from .number import Number, ParseError, ParseResult
from .states import (
    ParserState,
    StartState,
    CompleteState,
    FailedState,
)

Chunk = Union[str, bytes, bytearray]


class NumberParser:
    """
    Parse a single JSON number incrementally.

    One instance handles one logical number; build a fresh parser for the
    next one.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

        # Accumulated text
        self.mantissa = MantissaBuffer()
        self.exponent = ExponentBuffer()
        self._finalised = False

        self._error = ParseError.NONE

        # Core state - initialize after buffers exist
        self._state: ParserState = StartState(self)

    @property
    def state(self) -> ParserState:
        """Current parser state object."""
        return self._state

    @property
    def state_name(self) -> str:
        """Name of current state for debugging."""
        return self._state.name

    @property
    def error(self) -> ParseError:
        return self._error

    @property
    def number(self) -> Number:
        """Accumulated number; meaningful once finalised without error."""
        return Number(self.mantissa.buffer, self.exponent.buffer)

    @property
    def result(self) -> ParseResult:
        return ParseResult(self._error, self.number)

    @property
    def is_complete(self) -> bool:
        """True once the parser has finished, successfully or not."""
        return self._state.terminal

    @property
    def is_failed(self) -> bool:
        return isinstance(self._state, FailedState)

    # ========================================================================
    # CORE PARSING METHODS
    # ========================================================================

    def _transition(self, new_state: ParserState) -> None:
        """Transition to a new state."""
        self._state = new_state

    def _complete(self) -> None:
        self._transition(CompleteState(self))
        self._finalise_buffers()

    def _fail(self, char: Optional[str] = None) -> None:
        if char is None:
            self.logger.debug("invalid number: end of stream in state %s", self._state.name)
        else:
            self.logger.debug("invalid number: %r in state %s", char, self._state.name)
        self._error = ParseError.INVALID_ARGUMENT
        self._transition(FailedState(self))

    def _finalise_buffers(self) -> None:
        if self._finalised:
            return
        self.mantissa.finalise()
        self.exponent.finalise()
        self._finalised = True

    def feed(self, chunk: Chunk) -> int:
        """
        Parse the next chunk of input.

        Args:
            chunk: Text or bytes. Bytes count one character per byte. An
                   empty chunk signals the end of the stream.

        Returns:
            Index in ``chunk`` of the first character not consumed. This is
            ``len(chunk)`` unless the number finished inside the chunk.
        """
        if isinstance(chunk, (bytes, bytearray)):
            text = chunk.decode('latin-1')
        elif isinstance(chunk, str):
            text = chunk
        else:
            raise TypeError(f"chunk must be str or bytes, not {type(chunk).__name__}")

        if not text:
            self._end_of_stream()
            return 0

        if self._state.terminal:
            return 0

        for pos, char in enumerate(text):
            self._state.handle(char)
            if self._state.terminal:
                return pos

        return len(text)

    def _end_of_stream(self) -> None:
        """Handle the empty chunk marking the end of input."""
        if self._error:
            return
        self._state.end_of_stream()
        self._finalise_buffers()

    def finalise(self) -> None:
        """Signal end of stream unless an error has already been recorded."""
        if not self._error:
            self.feed("")


def parse_number(text: Chunk, logger: Optional[logging.Logger] = None) -> Tuple[ParseResult, int]:
    """
    Parse ``text`` in one call.

    Returns:
        The parse result and the number of characters consumed.
    """
    parser = NumberParser(logger=logger)
    consumed = parser.feed(text)
    if not parser.is_complete:
        parser.finalise()
    return parser.result, consumed
