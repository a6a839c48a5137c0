"""
Buffers - Accumulate the normalized text of a number.

The mantissa and exponent buffers collect the characters the state machine
decides are significant. They do no validation of their own.
"""


class MantissaBuffer:
    """
    Accumulates the significand: optional sign, digits and decimal point.

    After finalise() the buffer is never empty.
    """

    def __init__(self):
        self._buffer: str = ""

    @property
    def buffer(self) -> str:
        """Get the mantissa text."""
        return self._buffer

    def append_negative(self) -> None:
        """Add a minus sign."""
        self._buffer += "-"

    def append_decimal(self) -> None:
        """Add a decimal point."""
        self._buffer += "."

    def append_digit(self, char: str) -> None:
        """Add one digit character."""
        self._buffer += char

    def finalise(self) -> None:
        if not self._buffer:
            self._buffer = "0"

    def __repr__(self) -> str:
        return f"MantissaBuffer({self._buffer!r})"


class ExponentBuffer:
    """
    Accumulates the exponent: optional sign and digits.

    The 'e'/'E' marker from the input is never stored; finalise() writes
    its own leading 'e'.
    """

    def __init__(self):
        self._buffer: str = ""

    @property
    def buffer(self) -> str:
        """Get the exponent text."""
        return self._buffer

    def append_digit(self, char: str) -> None:
        """Add one digit character."""
        self._buffer += char

    def append_negative(self) -> None:
        """Add a minus sign."""
        self._buffer += "-"

    def finalise(self) -> None:
        if not self._buffer:
            self._buffer = "0"
        self._buffer = "e" + self._buffer

    def __repr__(self) -> str:
        return f"ExponentBuffer({self._buffer!r})"
