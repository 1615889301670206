"""
MaskSplitter
============

Splits a Delphi-style mask text into its three ``;``-separated fields:

+-------+-------------------+----------------------------------------------+
| Stage | Field             | Meaning                                      |
+=======+===================+==============================================+
| 0     | pattern           | The mask grammar itself                      |
+-------+-------------------+----------------------------------------------+
| 1     | save flag         | ``0`` = value is raw data, anything else =   |
|       |                   | value already contains the mask literals     |
+-------+-------------------+----------------------------------------------+
| 2     | space placeholder | Character shown for an unfilled data slot    |
+-------+-------------------+----------------------------------------------+

A ``;`` preceded by an unescaped ``\\`` stays part of the pattern.  Missing
trailing fields keep their defaults, so the splitter accepts any string.
"""
from __future__ import annotations

import logging

from ..models import MaskSpec

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = ";"
_ESCAPE = "\\"


class MaskSplitter:
    """Stateless splitter producing a :class:`~editmask.models.MaskSpec`."""

    def split(self, mask_text: str, default_space_placeholder: str = "_") -> MaskSpec:
        """
        Split *mask_text* into ``(pattern, save_formatted, space_placeholder)``.

        Parameters
        ----------
        mask_text:
            Full mask text, e.g. ``"(999) 999-9999;0;_"``.
        default_space_placeholder:
            Placeholder used when the text has no third field.

        Returns
        -------
        MaskSpec
        """
        stage = 0
        pattern_chars = []
        save_formatted = True
        space_placeholder = default_space_placeholder
        escaped = False

        for ch in mask_text:
            if stage == 0:
                if ch == _FIELD_SEPARATOR and not escaped:
                    stage += 1
                else:
                    pattern_chars.append(ch)
                    escaped = ch == _ESCAPE and not escaped
            elif stage == 1:
                if ch == _FIELD_SEPARATOR:
                    stage += 1
                else:
                    # Every character re-evaluates the flag; the last one wins.
                    save_formatted = ch != "0"
            elif stage == 2:
                if ch == _FIELD_SEPARATOR:
                    stage += 1
                else:
                    space_placeholder = ch

        spec = MaskSpec(
            pattern="".join(pattern_chars),
            save_formatted=save_formatted,
            space_placeholder=space_placeholder,
        )
        logger.debug("Split mask %r -> %r", mask_text, spec)
        return spec
