"""
CharSetParser
=============

Parses one ``[...]`` character set of a mask pattern (Lazarus extension).

Set syntax, evaluated character by character after the opening ``[``:

+-------------+-------------------------------------------------------------+
| Character   | Meaning                                                     |
+=============+=============================================================+
| ``!``       | First character of the set: the set is *negated*            |
+-------------+-------------------------------------------------------------+
| ``|``       | First character of a non-negated set: the set is *optional* |
|             | (a blank is accepted)                                       |
+-------------+-------------------------------------------------------------+
| ``-``       | Range between the previous member and the next character,   |
|             | unless it is first in the set or directly before ``]``      |
+-------------+-------------------------------------------------------------+
| ``\\``       | The next character is a member (or the end of a range)      |
+-------------+-------------------------------------------------------------+
| ``]``       | Closes the set                                              |
+-------------+-------------------------------------------------------------+

The parser never touches the caller's scan position: it receives the index of
the opening bracket and returns the index just past the closing one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from ..errors import InvalidMask

logger = logging.getLogger(__name__)

_ESCAPE = "\\"
_NEGATE = "!"
_OPTIONAL = "|"
_RANGE = "-"
_CLOSE = "]"


@dataclass(frozen=True)
class CharSetSpec:
    """A parsed character set, before it becomes a mask element."""

    members: FrozenSet[str]
    negated: bool = False
    optional: bool = False


def _char_range(lo: str, hi: str) -> List[str]:
    """Inclusive code-point range; empty when *lo* sorts after *hi*."""
    return [chr(code) for code in range(ord(lo), ord(hi) + 1)]


class CharSetParser:
    """Stateless parser for a single bracketed character set."""

    def parse(self, pattern: str, open_at: int) -> Tuple[CharSetSpec, int]:
        """
        Parse the set whose ``[`` is at ``pattern[open_at]``.

        Returns
        -------
        Tuple[CharSetSpec, int]
            The set and the index of the first character after its ``]``.

        Raises
        ------
        InvalidMask
            The set is empty, never closed, or has a malformed range.
        """
        members: List[str] = []
        negated = False
        optional = False
        escaped = False
        in_range = False
        last_char: Optional[str] = None

        i = open_at + 1
        length = len(pattern)
        while i < length:
            ch = pattern[i]
            if escaped:
                members.extend(self._expand(last_char, ch, in_range))
                last_char = ch
                escaped = in_range = False
            elif ch == _ESCAPE:
                escaped = True
            elif ch == _NEGATE and not negated and not members:
                negated = True
            elif ch == _OPTIONAL and not optional and not negated and not members:
                optional = True
            elif ch == _RANGE:
                if in_range:
                    logger.debug("Repeated range marker in %r at %d", pattern, i)
                    raise InvalidMask("Illegal range in character set", i)
                if not members or (i + 1 < length and pattern[i + 1] == _CLOSE):
                    members.append(ch)
                    last_char = ch
                else:
                    in_range = True
            elif ch == _CLOSE:
                if not members:
                    logger.debug("Empty character set in %r at %d", pattern, open_at)
                    raise InvalidMask("Empty character set", open_at)
                spec = CharSetSpec(
                    members=frozenset(members), negated=negated, optional=optional
                )
                return spec, i + 1
            else:
                members.extend(self._expand(last_char, ch, in_range))
                last_char = ch
                in_range = False
            i += 1

        logger.debug("Unterminated character set in %r at %d", pattern, open_at)
        raise InvalidMask("Character set is not closed", open_at)

    @staticmethod
    def _expand(last_char: Optional[str], ch: str, in_range: bool) -> List[str]:
        if in_range and last_char is not None:
            return _char_range(last_char, ch)
        return [ch]
