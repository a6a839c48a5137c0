"""
numstream - an incremental JSON number parser for chunked input.
"""

from .number import Number, ParseError, ParseResult
from .parser import NumberParser, parse_number
from .splits import grind, check_splits, GrindFailure, GrindMismatch, GrindReport

__all__ = [
    'Number',
    'ParseError',
    'ParseResult',
    'NumberParser',
    'parse_number',
    'grind',
    'check_splits',
    'GrindFailure',
    'GrindMismatch',
    'GrindReport',
]
__version__ = '0.1.0'
