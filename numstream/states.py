"""
Parser State Classes - Each state handles characters and determines transitions.

The number grammar is walked one character at a time. The current state
object is kept on the parser between feed() calls, so a chunk can end
anywhere and the next chunk picks up in the same place.

A state that accepts a character consumes it. A state that rejects a
character moves the parser to CompleteState or FailedState and leaves the
character for the caller.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parser import NumberParser


def is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def is_exponent_marker(char: str) -> bool:
    return char == 'e' or char == 'E'


# ========================================================================
# BASE STATE CLASS
# ========================================================================

class ParserState:
    """Base class for parser states."""

    name = "base"
    terminal = False

    def __init__(self, parser: 'NumberParser'):
        self.parser = parser
        self.mantissa = parser.mantissa
        self.exponent = parser.exponent

    def handle(self, char: str) -> None:
        """Handle a character. Subclasses must implement."""
        raise NotImplementedError

    def end_of_stream(self) -> None:
        """Resolve the state now that no more input will arrive."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.name}>"


# ========================================================================
# MANTISSA STATES
# ========================================================================

class StartState(ParserState):
    """Nothing consumed yet."""

    name = "START"

    def handle(self, char: str) -> None:
        if char == '+':
            self.parser._transition(SignSeenState(self.parser))
        elif char == '-':
            self.mantissa.append_negative()
            self.parser._transition(SignSeenState(self.parser))
        else:
            _handle_integer_start(self, char)

    def end_of_stream(self) -> None:
        self.parser._fail()


class SignSeenState(ParserState):
    """Consumed a leading sign."""

    name = "SIGN_SEEN"

    def handle(self, char: str) -> None:
        _handle_integer_start(self, char)

    def end_of_stream(self) -> None:
        self.parser._fail()


def _handle_integer_start(state: ParserState, char: str) -> None:
    """
    First character after the optional sign - shared by StartState and SignSeenState.

    The integer part may be missing entirely: ".5" and "e5" are accepted,
    the mantissa defaulting to "0" when nothing was written.
    """
    if is_digit(char):
        state.mantissa.append_digit(char)
        if char == '0':
            state.parser._transition(LeadingZeroState(state.parser))
        else:
            state.parser._transition(IntDigitsState(state.parser))
    elif char == '.':
        state.mantissa.append_decimal()
        state.parser._transition(FracPointState(state.parser))
    elif is_exponent_marker(char):
        state.parser._transition(ExponentStartState(state.parser))
    else:
        state.parser._fail(char)


class LeadingZeroState(ParserState):
    """Integer part is a single '0'; only a decimal point may follow."""

    name = "LEADING_ZERO"

    def handle(self, char: str) -> None:
        if char == '.':
            self.mantissa.append_decimal()
            self.parser._transition(FracPointState(self.parser))
        else:
            self.parser._fail(char)

    def end_of_stream(self) -> None:
        self.parser._complete()


class IntDigitsState(ParserState):
    """Inside the integer digit run."""

    name = "INT_DIGITS"

    def handle(self, char: str) -> None:
        if is_digit(char):
            self.mantissa.append_digit(char)
        elif char == '.':
            self.mantissa.append_decimal()
            self.parser._transition(FracPointState(self.parser))
        elif is_exponent_marker(char):
            self.parser._transition(ExponentStartState(self.parser))
        else:
            self.parser._complete()

    def end_of_stream(self) -> None:
        self.parser._complete()


class FracPointState(ParserState):
    """Just consumed the decimal point."""

    name = "FRAC_POINT"

    def handle(self, char: str) -> None:
        if is_digit(char):
            self.mantissa.append_digit(char)
            self.parser._transition(FracDigitsState(self.parser))
        elif is_exponent_marker(char):
            self.parser._transition(ExponentStartState(self.parser))
        else:
            # "1." is accepted; no fraction digit is required
            self.parser._complete()

    def end_of_stream(self) -> None:
        self.parser._complete()


class FracDigitsState(ParserState):
    """Inside the fraction digit run."""

    name = "FRAC_DIGITS"

    def handle(self, char: str) -> None:
        if is_digit(char):
            self.mantissa.append_digit(char)
        elif is_exponent_marker(char):
            self.parser._transition(ExponentStartState(self.parser))
        else:
            self.parser._complete()

    def end_of_stream(self) -> None:
        self.parser._complete()


# ========================================================================
# EXPONENT STATES
# ========================================================================

class ExponentStartState(ParserState):
    """Consumed 'e' or 'E', expecting a sign or the first exponent digit."""

    name = "EXPONENT_START"

    def handle(self, char: str) -> None:
        if char == '-':
            self.exponent.append_negative()
            self.parser._transition(ExponentSignState(self.parser))
        elif char == '+':
            self.parser._transition(ExponentSignState(self.parser))
        elif is_digit(char):
            self.exponent.append_digit(char)
            self.parser._transition(ExponentDigitsState(self.parser))
        else:
            self.parser._fail(char)

    def end_of_stream(self) -> None:
        self.parser._fail()


class ExponentSignState(ParserState):
    """Consumed the exponent sign, expecting the first exponent digit."""

    name = "EXPONENT_SIGN"

    def handle(self, char: str) -> None:
        if is_digit(char):
            self.exponent.append_digit(char)
            self.parser._transition(ExponentDigitsState(self.parser))
        else:
            self.parser._fail(char)

    def end_of_stream(self) -> None:
        self.parser._fail()


class ExponentDigitsState(ParserState):
    """Inside the exponent digit run."""

    name = "EXPONENT_DIGITS"

    def handle(self, char: str) -> None:
        if is_digit(char):
            self.exponent.append_digit(char)
        else:
            self.parser._complete()

    def end_of_stream(self) -> None:
        self.parser._complete()


# ========================================================================
# TERMINAL STATES
# ========================================================================

class CompleteState(ParserState):
    """The number is finished. Further input belongs to the caller."""

    name = "COMPLETE"
    terminal = True

    def handle(self, char: str) -> None:
        pass

    def end_of_stream(self) -> None:
        pass


class FailedState(ParserState):
    """The consumed input cannot be extended into a valid number."""

    name = "FAILED"
    terminal = True

    def handle(self, char: str) -> None:
        pass

    def end_of_stream(self) -> None:
        pass
