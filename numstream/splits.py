"""
Grind - exhaustive split-point consistency check for the number parser.

Parsing a string in one call must give the same result as parsing it in two
chunks split at any position. check_splits() reports every disagreement;
grind() raises on the first one.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .number import ParseResult
from .parser import NumberParser, Chunk


@dataclass(frozen=True)
class SplitOutcome:
    """End state of one parse: result plus characters consumed."""

    result: ParseResult
    consumed: int

    def __str__(self) -> str:
        return f"{self.result},{self.consumed}"


@dataclass(frozen=True)
class GrindMismatch:
    """A split whose outcome disagrees with the whole-input parse."""

    split: int
    expected: SplitOutcome
    actual: SplitOutcome

    def __str__(self) -> str:
        return (
            f"grind failure: expected {self.expected} "
            f"but got {self.actual} at split {self.split}"
        )


@dataclass
class GrindReport:
    """Baseline outcome and all mismatching splits for one input."""

    text: Chunk
    baseline: SplitOutcome
    splits_checked: int = 0
    mismatches: List[GrindMismatch] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        return not self.mismatches

    @property
    def result(self) -> ParseResult:
        return self.baseline.result


class GrindFailure(AssertionError):
    """The parser disagreed with itself across a chunk boundary."""

    def __init__(self, mismatch: GrindMismatch):
        super().__init__(str(mismatch))
        self.mismatch = mismatch

    @property
    def expected(self) -> SplitOutcome:
        return self.mismatch.expected

    @property
    def actual(self) -> SplitOutcome:
        return self.mismatch.actual


def _parse_whole(text: Chunk, logger: Optional[logging.Logger]) -> SplitOutcome:
    parser = NumberParser(logger=logger)
    consumed = parser.feed(text)
    if not parser.is_complete:
        parser.finalise()
    return SplitOutcome(parser.result, consumed)


def _parse_split(text: Chunk, split: int, logger: Optional[logging.Logger]) -> SplitOutcome:
    parser = NumberParser(logger=logger)
    consumed = parser.feed(text[:split])
    if not parser.is_complete:
        consumed = split + parser.feed(text[split:])
    if not parser.is_complete:
        parser.finalise()
    return SplitOutcome(parser.result, consumed)


def check_splits(text: Chunk, logger: Optional[logging.Logger] = None) -> GrindReport:
    """
    Compare the whole-input parse of ``text`` against every two-chunk split.

    Never raises for a disagreement; inspect ``GrindReport.mismatches``.
    """
    logger = logger or logging.getLogger(__name__)

    baseline = _parse_whole(text, logger)
    report = GrindReport(text=text, baseline=baseline)
    logger.debug("grind %r baseline %s", text, baseline)

    for split in range(1, len(text)):
        outcome = _parse_split(text, split, logger)
        report.splits_checked += 1
        if outcome != baseline:
            mismatch = GrindMismatch(split, baseline, outcome)
            logger.debug("%s", mismatch)
            report.mismatches.append(mismatch)

    return report


def grind(text: Chunk, logger: Optional[logging.Logger] = None) -> ParseResult:
    """
    Parse ``text`` and verify every split agrees with the whole-input parse.

    Returns:
        The whole-input parse result.

    Raises:
        GrindFailure: carrying the expected and actual outcome of the first
        disagreeing split.
    """
    report = check_splits(text, logger=logger)
    if not report.consistent:
        raise GrindFailure(report.mismatches[0])
    return report.result
