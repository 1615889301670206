"""
ValueTransducer
===============

Moves value characters in and out of a compiled mask.

Two independent switches select one of four algorithms:

+----------------+------------------------------+------------------------------+
|                | value is formatted           | value is raw                 |
+================+==============================+==============================+
| **apply**      | line value segments up on    | fill data slots in order,    |
|                | the mask literals            | literals come from the mask  |
+----------------+------------------------------+------------------------------+
| **remove**     | line value segments up on    | fill data slots in order,    |
|                | the mask literals, drop      | drop the literal slots       |
|                | the literal slots            |                              |
+----------------+------------------------------+------------------------------+

Formatted values
----------------
Literal-like elements (literals and the locale date / time separators) act as
*anchors*.  The value text between two anchors is placed into the data span
between the matching mask anchors.  When an anchor character no longer occurs
in the rest of the value, that rest is the final segment.  A value that does
not start with the mask's leading anchor is not placed at all.

Direction
---------
A right-to-left mask (``!``) packs each segment against the right edge of its
span and walks raw values from their end, so short values end up
right-aligned.

Every buffer is created per call; the transducer keeps no state between
calls and never raises on a value.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..models import INVARIANT_SEPARATORS, CompiledMask, LocaleSeparators

logger = logging.getLogger(__name__)

# Raw-mode padding once the value is exhausted.
_BLANK = " "

# One slot per mask element; ``None`` marks an empty slot in removal buffers.
WorkBuffer = List[Optional[str]]


class ValueTransducer:
    """
    Apply or remove a :class:`CompiledMask` on string values.

    Parameters
    ----------
    mask:
        The compiled mask.
    separators:
        Locale provider for the ``/`` and ``:`` elements.  Defaults to the
        invariant ``/`` and ``:``.
    """

    def __init__(
        self,
        mask: CompiledMask,
        separators: Optional[LocaleSeparators] = None,
    ) -> None:
        self.mask = mask
        self.separators = separators or INVARIANT_SEPARATORS

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(self, value: str, space_placeholder: str, formatted: bool) -> str:
        """
        Format *value* against the mask.

        Returns one character per mask element: literal positions carry the
        mask literal, data positions carry value characters or
        *space_placeholder* where nothing was placed.
        """
        buffer: WorkBuffer = [
            element.literal_char(self.separators) if element.is_literal_like
            else space_placeholder
            for element in self.mask.elements
        ]
        if formatted:
            self._place_formatted(value, buffer)
        else:
            self._place_raw(value, buffer)
        return "".join(buffer)

    def remove(self, value: str, formatted: bool) -> str:
        """Strip the mask literals from *value*, returning the raw data."""
        buffer: WorkBuffer = [None] * len(self.mask.elements)
        if formatted:
            self._place_formatted(value, buffer)
        else:
            self._place_raw(value, buffer)
        return self._condense(buffer)

    # ------------------------------------------------------------------
    # Raw values
    # ------------------------------------------------------------------

    def _place_raw(self, value: str, buffer: WorkBuffer) -> None:
        """Fill every data slot with the next value character (or a blank)."""
        elements = self.mask.elements
        if self.mask.right_to_left:
            slots = range(len(elements) - 1, -1, -1)
            chars = iter(reversed(value))
        else:
            slots = range(len(elements))
            chars = iter(value)

        for i in slots:
            if not elements[i].is_literal_like:
                buffer[i] = next(chars, _BLANK)

    # ------------------------------------------------------------------
    # Formatted values
    # ------------------------------------------------------------------

    def _place_formatted(self, value: str, buffer: WorkBuffer) -> None:
        """Place the value segments between literal anchors."""
        anchor = self._find_anchor(0)
        if anchor is not None and anchor[0] == 0 and value[:1] != anchor[1]:
            logger.debug(
                "Value %r does not start with mask literal %r; nothing placed",
                value,
                anchor[1],
            )
            return

        mask_pos = 0
        value_pos = 0
        while True:
            if anchor is None:
                self._place_segment(value[value_pos:], buffer, mask_pos, len(buffer))
                return

            anchor_at, anchor_char = anchor
            found_at = value.find(anchor_char, value_pos)
            if found_at < 0:
                self._place_segment(value[value_pos:], buffer, mask_pos, anchor_at)
                return

            self._place_segment(value[value_pos:found_at], buffer, mask_pos, anchor_at)
            value_pos = found_at + 1
            mask_pos = anchor_at + 1
            anchor = self._find_anchor(mask_pos)

    def _find_anchor(self, start: int) -> Optional[Tuple[int, str]]:
        """Return ``(index, char)`` of the first literal-like element at or after *start*."""
        elements = self.mask.elements
        for i in range(start, len(elements)):
            if elements[i].is_literal_like:
                return i, elements[i].literal_char(self.separators)
        return None

    def _place_segment(
        self, segment: str, buffer: WorkBuffer, start: int, end: int
    ) -> None:
        """Copy *segment* into ``buffer[start:end]`` packed against one edge."""
        if self.mask.right_to_left:
            pos = end - 1
            for ch in reversed(segment):
                if pos < start:
                    break
                buffer[pos] = ch
                pos -= 1
        else:
            pos = start
            for ch in segment:
                if pos >= end:
                    break
                buffer[pos] = ch
                pos += 1

    # ------------------------------------------------------------------

    @staticmethod
    def _condense(buffer: WorkBuffer) -> str:
        return "".join(ch for ch in buffer if ch is not None)
