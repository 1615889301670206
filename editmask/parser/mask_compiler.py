"""
MaskCompiler
============

Compiles a mask pattern (the first field of a mask text) into a
:class:`~editmask.models.CompiledMask`.

Pattern characters:

+-----------+-------------------------------------------------------------+
| Character | Meaning                                                     |
+===========+=============================================================+
| ``\\``     | The next character is a literal                             |
+-----------+-------------------------------------------------------------+
| ``!``     | Right-to-left: trim leading instead of trailing blanks      |
+-----------+-------------------------------------------------------------+
| ``>``     | Following characters are upper case (``<>`` = no case)      |
+-----------+-------------------------------------------------------------+
| ``<``     | Following characters are lower case                         |
+-----------+-------------------------------------------------------------+
| ``[ ]``   | Character set, see :mod:`editmask.parser.charset_parser`    |
+-----------+-------------------------------------------------------------+
| ``l L``   | Letter (optional / required)                                |
+-----------+-------------------------------------------------------------+
| ``a A``   | Alphanumeric (optional / required)                          |
+-----------+-------------------------------------------------------------+
| ``c C``   | Any character (optional / required)                         |
+-----------+-------------------------------------------------------------+
| ``9 0``   | Digit (optional / required)                                 |
+-----------+-------------------------------------------------------------+
| ``#``     | Digit, ``+`` or ``-`` (optional)                            |
+-----------+-------------------------------------------------------------+
| ``: /``   | Locale time / date separator                                |
+-----------+-------------------------------------------------------------+
| ``h H``   | Hexadecimal digit (optional / required)                     |
+-----------+-------------------------------------------------------------+
| ``b B``   | Binary digit (optional / required)                          |
+-----------+-------------------------------------------------------------+
| other     | Literal                                                     |
+-----------+-------------------------------------------------------------+
"""
from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from ..models import CASE_TRANSFORMS, CASED_KINDS, CompiledMask, MaskElement
from .charset_parser import CharSetParser, CharSetSpec

logger = logging.getLogger(__name__)

_ESCAPE = "\\"
_RIGHT_TO_LEFT = "!"
_LOWER_CASE = "<"
_UPPER_CASE = ">"
_CHARSET_OPEN = "["

# Placeholder character -> (kind, required)
_PLACEHOLDERS: Dict[str, Tuple[str, bool]] = {
    "l": ("LETTER", False),
    "L": ("LETTER", True),
    "a": ("ALPHANUMERIC", False),
    "A": ("ALPHANUMERIC", True),
    "c": ("ANY", False),
    "C": ("ANY", True),
    "9": ("NUMBER", False),
    "0": ("NUMBER", True),
    "#": ("NUMBER_SIGNED", False),
    ":": ("HOUR_SEPARATOR", False),
    "/": ("DATE_SEPARATOR", False),
    "h": ("HEX", False),
    "H": ("HEX", True),
    "b": ("BINARY", False),
    "B": ("BINARY", True),
}

MASK_CHARS = frozenset(_PLACEHOLDERS)

# (placeholder character, case region) -> element
_TYPE_TABLE: Dict[Tuple[str, str], MaskElement] = {
    (ch, case): MaskElement(
        kind=kind,
        required=required,
        case=case if kind in CASED_KINDS else "NONE",
    )
    for ch, (kind, required) in _PLACEHOLDERS.items()
    for case in CASE_TRANSFORMS
}


def _charset_element(spec: CharSetSpec) -> MaskElement:
    if spec.negated:
        kind = "CHARSET_NEGATED_FIXED"
    elif spec.optional:
        kind = "CHARSET"
    else:
        kind = "CHARSET_FIXED"
    return MaskElement(
        kind=kind,
        required=kind != "CHARSET",
        members=spec.members,
        negated=spec.negated,
    )


class MaskCompiler:
    """Stateless compiler from pattern text to :class:`CompiledMask`."""

    def __init__(self) -> None:
        self._charset_parser = CharSetParser()

    def compile(self, pattern: str) -> CompiledMask:
        """
        Compile *pattern* into its element sequence.

        Raises
        ------
        InvalidMask
            A character set in the pattern is empty, unterminated or has a
            malformed range.  No partial mask is returned.
        """
        elements: List[MaskElement] = []
        in_upper = False
        in_lower = False
        right_to_left = False
        escaped = False

        i = 0
        length = len(pattern)
        while i < length:
            ch = pattern[i]

            if escaped:
                elements.append(MaskElement(kind="LITERAL", literal=ch))
                escaped = False
            elif ch == _ESCAPE:
                escaped = True
            elif ch == _RIGHT_TO_LEFT:
                right_to_left = True
            elif ch == _LOWER_CASE:
                in_lower, in_upper = True, False
            elif ch == _UPPER_CASE:
                # "<>" switches case conversion off again, even after an escaped "<"
                in_lower = False
                in_upper = not (i > 0 and pattern[i - 1] == _LOWER_CASE)
            elif ch == _CHARSET_OPEN:
                spec, i = self._charset_parser.parse(pattern, i)
                elements.append(_charset_element(spec))
                continue
            elif ch in MASK_CHARS:
                case = "UPPER" if in_upper else "LOWER" if in_lower else "NONE"
                elements.append(_TYPE_TABLE[(ch, case)])
            else:
                elements.append(MaskElement(kind="LITERAL", literal=ch))
            i += 1

        compiled = CompiledMask(elements=tuple(elements), right_to_left=right_to_left)
        logger.debug(
            "Compiled pattern %r into %d elements (right_to_left=%s)",
            pattern,
            len(compiled),
            right_to_left,
        )
        return compiled
