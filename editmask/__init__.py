"""
editmask
========

A Python engine for Delphi / Lazarus ``EditMask`` strings: it splits and
compiles masks such as ``(999) 999-9999;0;_`` and uses them to format values
or strip the formatting back off.

Quick start
-----------
>>> from editmask import apply_mask, remove_mask, split_mask
>>> spec = split_mask("(999) 999-9999;0;_")
>>> apply_mask("8005551212", spec)
'(800) 555-1212'
>>> remove_mask("(800) 555-1212", split_mask("(999) 999-9999;1;_"))
'8005551212'
"""

from .errors import InvalidMask
from .models import (
    INVARIANT_SEPARATORS,
    CompiledMask,
    LocaleSeparators,
    MaskElement,
    MaskSpec,
)
from .parser.mask_compiler import MaskCompiler
from .parser.mask_splitter import MaskSplitter
from .pipeline.locale_provider import system_separators
from .pipeline.mask_formatter import (
    MaskFormatter,
    apply_mask,
    compile_mask,
    remove_mask,
    split_mask,
)
from .transducer.value_transducer import ValueTransducer

__version__ = "0.1.0"
__all__ = [
    "INVARIANT_SEPARATORS",
    "CompiledMask",
    "InvalidMask",
    "LocaleSeparators",
    "MaskCompiler",
    "MaskElement",
    "MaskFormatter",
    "MaskSpec",
    "MaskSplitter",
    "ValueTransducer",
    "apply_mask",
    "compile_mask",
    "remove_mask",
    "split_mask",
    "system_separators",
]
