"""
Render an exception and the exceptions behind it as readable text.
"""

from typing import List, Optional


def _describe(exc: BaseException) -> str:
    message = str(exc)
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


def _cause(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


def explain(exc: BaseException) -> str:
    """
    Explain ``exc`` and its chain, outermost first.

    Each underlying exception is on its own line, indented one level deeper
    than the exception it caused.
    """
    lines: List[str] = []
    seen = set()
    level = 0
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        lines.append("  " * level + _describe(current))
        current = _cause(current)
        level += 1
    return "\n".join(lines)
