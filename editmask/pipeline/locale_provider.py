"""
Locale separators for the ``/`` and ``:`` mask characters.

The engine never reads the locale on its own: callers pass a
:class:`~editmask.models.LocaleSeparators` explicitly.  :func:`system_separators`
builds one from the process ``LC_TIME`` settings for callers that want the
host's conventions.
"""
from __future__ import annotations

import locale
import logging

from ..models import INVARIANT_SEPARATORS, LocaleSeparators

logger = logging.getLogger(__name__)


def first_separator(fmt: str, fallback: str) -> str:
    """
    Return the first separator character of a ``strftime`` format.

    Directives (``%d``, ``%Ey`` ...), letters, digits and whitespace are
    skipped.  *fallback* is returned when no separator is present.

    >>> first_separator("%d.%m.%Y", "/")
    '.'
    >>> first_separator("%H%M", ":")
    ':'
    """
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%":
            i += 2
            continue
        if not ch.isalnum() and not ch.isspace():
            return ch
        i += 1
    return fallback


def system_separators() -> LocaleSeparators:
    """Date / time separators of the current ``LC_TIME`` locale."""
    langinfo = getattr(locale, "nl_langinfo", None)
    if langinfo is None:
        logger.debug("nl_langinfo unavailable; using invariant separators")
        return INVARIANT_SEPARATORS

    date_fmt = langinfo(locale.D_FMT)
    time_fmt = langinfo(locale.T_FMT)
    separators = LocaleSeparators(
        date_separator=first_separator(date_fmt, INVARIANT_SEPARATORS.date_separator),
        time_separator=first_separator(time_fmt, INVARIANT_SEPARATORS.time_separator),
    )
    logger.debug(
        "Locale formats %r / %r -> separators %r", date_fmt, time_fmt, separators
    )
    return separators
