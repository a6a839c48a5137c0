"""Test parse results for whole-input and chunked feeding."""

import logging

import pytest

from numstream import NumberParser, Number, ParseError, ParseResult, parse_number


def parse_all(text):
    """Feed ``text`` in one call, then finalise if needed."""
    parser = NumberParser()
    pos = parser.feed(text)
    if not parser.is_complete:
        parser.finalise()
    return parser, pos


@pytest.mark.parametrize('text, mantissa, exponent', [
    ('0', '0', 'e0'),
    ('-0', '-0', 'e0'),
    ('0.', '0.', 'e0'),
    ('0.25', '0.25', 'e0'),
    ('5', '5', 'e0'),
    ('+5', '5', 'e0'),
    ('-5', '-5', 'e0'),
    ('100.0', '100.0', 'e0'),
    ('1.', '1.', 'e0'),
    ('1.e5', '1.', 'e5'),
    ('1e5', '1', 'e5'),
    ('1E5', '1', 'e5'),
    ('1e+5', '1', 'e5'),
    ('1e-5', '1', 'e-5'),
    ('-0.5E+10', '-0.5', 'e10'),
    ('6.02e023', '6.02', 'e023'),
    ('123456789012345678901234567890', '123456789012345678901234567890', 'e0'),
    ('.5', '.5', 'e0'),
    ('-.5', '-.5', 'e0'),
    ('.', '.', 'e0'),
    ('e5', '0', 'e5'),
    ('+e3', '0', 'e3'),
    ('-E2', '-', 'e2'),
])
def test_valid_numbers(text, mantissa, exponent):
    """Valid numbers are normalized into mantissa and exponent text."""
    parser, pos = parse_all(text)

    assert parser.error is ParseError.NONE
    assert parser.number == Number(mantissa, exponent)
    assert pos == len(text)


@pytest.mark.parametrize('text, pos', [
    ('', 0),
    ('-', 1),
    ('+', 1),
    ('1e', 2),
    ('1e-', 3),
    ('1e+', 3),
    ('01', 1),
    ('00', 1),
    ('0e5', 1),
    ('-x', 1),
    ('x', 0),
    ('1ex', 2),
])
def test_invalid_numbers(text, pos):
    parser, consumed = parse_all(text)

    assert parser.error is ParseError.INVALID_ARGUMENT
    assert parser.is_failed
    assert consumed == pos


def test_leading_zero_rule():
    assert parse_all('0')[0].result == ParseResult(ParseError.NONE, Number('0', 'e0'))
    assert parse_all('0.')[0].error is ParseError.NONE
    assert parse_all('01')[0].error is ParseError.INVALID_ARGUMENT


def test_sign_handling():
    assert parse_all('+5')[0].mantissa.buffer == '5'
    assert parse_all('-5')[0].mantissa.buffer == '-5'


def test_trailing_garbage_terminates_number():
    """The first character outside the grammar is left for the caller."""
    parser = NumberParser()
    pos = parser.feed('100.0x')

    assert pos == 5
    assert parser.is_complete
    assert not parser.is_failed
    assert parser.error is ParseError.NONE
    assert parser.number == Number('100.0', 'e0')


@pytest.mark.parametrize('text, pos', [
    ('12,', 2),
    ('12 ', 2),
    ('12}', 2),
    ('-3.5]', 4),
    ('1e9,', 3),
    ('0.,', 2),
])
def test_terminators(text, pos):
    parser = NumberParser()
    assert parser.feed(text) == pos
    assert parser.is_complete
    assert parser.error is ParseError.NONE


def test_empty_first_feed_is_invalid():
    parser = NumberParser()
    pos = parser.feed('')

    assert pos == 0
    assert parser.error is ParseError.INVALID_ARGUMENT


def test_feed_after_complete_consumes_nothing():
    parser = NumberParser()
    parser.feed('7 ')

    assert parser.feed('89') == 0
    assert parser.number == Number('7', 'e0')


def test_feed_after_failure_consumes_nothing():
    parser = NumberParser()
    parser.feed('0')
    parser.feed('1')

    assert parser.feed('23') == 0
    assert parser.error is ParseError.INVALID_ARGUMENT


def test_finalise_after_failure_is_noop():
    """Partial text of a failed parse is left as accumulated."""
    parser = NumberParser()
    parser.feed('-x')
    parser.finalise()

    assert parser.mantissa.buffer == '-'
    assert parser.exponent.buffer == ''


def test_error_at_end_of_stream_still_finalises():
    parser = NumberParser()
    parser.feed('1e')
    parser.finalise()

    assert parser.error is ParseError.INVALID_ARGUMENT
    assert parser.number == Number('1', 'e0')


def test_finalise_twice_does_not_repeat_marker():
    parser = NumberParser()
    parser.feed('3')
    parser.finalise()
    parser.finalise()
    parser.feed('')

    assert str(parser.number) == '3e0'


def test_finalise_after_terminator_keeps_text():
    """A number finished by a terminator is already final; finalise adds nothing."""
    parser = NumberParser()
    assert parser.feed('7 ') == 1
    assert parser.number == Number('7', 'e0')

    parser.finalise()
    parser.feed('')

    assert parser.error is ParseError.NONE
    assert parser.exponent.buffer == 'e0'
    assert str(parser.number) == '7e0'


def test_missing_integer_part_defaults():
    """With no integer digits the mantissa keeps only what was written."""
    result, consumed = parse_number('e5,')

    assert result == ParseResult(ParseError.NONE, Number('0', 'e5'))
    assert consumed == 2


def test_bytes_chunks():
    parser = NumberParser()
    assert parser.feed(b'3.1') == 3
    assert parser.feed(bytearray(b'4e2,')) == 3
    assert parser.number == Number('3.14', 'e2')


def test_bytes_positions_count_bytes():
    parser = NumberParser()
    assert parser.feed('12é'.encode('utf-8')) == 2


def test_rejects_other_chunk_types():
    parser = NumberParser()
    with pytest.raises(TypeError):
        parser.feed(123)


def test_result_rendering():
    ok, _ = parse_number('100.0')
    assert str(ok) == '100.0e0'

    bad, _ = parse_number('1e')
    assert str(bad) == 'numstream.parse : 22 : Invalid argument'


def test_parse_number_helper():
    result, consumed = parse_number('-12.5e3 rest')

    assert result == ParseResult(ParseError.NONE, Number('-12.5', 'e3'))
    assert consumed == 7


def test_failure_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger='numstream.parser')
    parse_number('01')

    assert 'invalid number' in caplog.text
    assert 'LEADING_ZERO' in caplog.text


def test_custom_logger(caplog):
    custom = logging.getLogger('tests.numbers')
    caplog.set_level(logging.DEBUG, logger='tests.numbers')
    parser = NumberParser(logger=custom)
    parser.feed('')

    assert any(r.name == 'tests.numbers' for r in caplog.records)
    assert 'end of stream' in caplog.text
