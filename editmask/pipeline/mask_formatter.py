"""
MaskFormatter
=============

High-level entry point tying the three engine stages together:

1. :class:`~editmask.parser.mask_splitter.MaskSplitter`
   - split ``pattern;saveFlag;spaceChar`` into a :class:`MaskSpec`.
2. :class:`~editmask.parser.mask_compiler.MaskCompiler`
   - compile the pattern into a :class:`CompiledMask`.
3. :class:`~editmask.transducer.value_transducer.ValueTransducer`
   - apply the mask to, or remove it from, a value.

The module-level :func:`split_mask`, :func:`apply_mask` and
:func:`remove_mask` compile the mask on every call; hold a
:class:`MaskFormatter` to compile once and format many values.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from ..models import CompiledMask, LocaleSeparators, MaskSpec
from ..parser.mask_compiler import MaskCompiler
from ..parser.mask_splitter import MaskSplitter
from ..transducer.value_transducer import ValueTransducer

logger = logging.getLogger(__name__)


def split_mask(mask_text: str, default_space_placeholder: str = "_") -> MaskSpec:
    """Split a mask text into its pattern, save flag and space placeholder."""
    return MaskSplitter().split(mask_text, default_space_placeholder)


def compile_mask(pattern: str) -> CompiledMask:
    """Compile a mask pattern; raises :class:`~editmask.errors.InvalidMask`."""
    return MaskCompiler().compile(pattern)


def apply_mask(
    value: str,
    spec: MaskSpec,
    separators: Optional[LocaleSeparators] = None,
) -> str:
    """
    Format *value* with the mask described by *spec*.

    With ``spec.save_formatted`` the value is expected to already contain the
    mask literals; otherwise it is raw data.

    >>> apply_mask("8005551212", split_mask("(999) 999-9999;0"))
    '(800) 555-1212'
    """
    return MaskFormatter(spec, separators).apply(value)


def remove_mask(
    value: str,
    spec: MaskSpec,
    separators: Optional[LocaleSeparators] = None,
) -> str:
    """
    Strip the mask described by *spec* from *value*.

    >>> remove_mask("(800) 555-1212", split_mask("(999) 999-9999;1"))
    '8005551212'
    """
    return MaskFormatter(spec, separators).remove(value)


class MaskFormatter:
    """
    A compiled mask ready to format values.

    Parameters
    ----------
    mask:
        Either a full mask text (``"(999) 999-9999;0;_"``) or an already
        split :class:`MaskSpec`.
    separators:
        Locale date / time separators.  ``None`` uses ``/`` and ``:``.
    default_space_placeholder:
        Placeholder used when a mask text has no third field.

    Raises
    ------
    InvalidMask
        The pattern cannot be compiled.
    """

    def __init__(
        self,
        mask: Union[str, MaskSpec],
        separators: Optional[LocaleSeparators] = None,
        default_space_placeholder: str = "_",
    ) -> None:
        if isinstance(mask, MaskSpec):
            self.spec = mask
        else:
            self.spec = split_mask(mask, default_space_placeholder)
        self.compiled = compile_mask(self.spec.pattern)
        self._transducer = ValueTransducer(self.compiled, separators)

    @property
    def separators(self) -> LocaleSeparators:
        return self._transducer.separators

    def apply(self, value: str) -> str:
        result = self._transducer.apply(
            value,
            self.spec.space_placeholder,
            formatted=self.spec.save_formatted,
        )
        logger.debug("apply %r -> %r", value, result)
        return result

    def remove(self, value: str) -> str:
        result = self._transducer.remove(value, formatted=self.spec.save_formatted)
        logger.debug("remove %r -> %r", value, result)
        return result

    def __repr__(self) -> str:
        return f"MaskFormatter(spec={self.spec!r}, compiled={self.compiled!r})"
