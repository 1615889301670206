"""
Core data models for the edit-mask engine.

A mask text such as ``(999) 999-9999;0;_`` is split into a :class:`MaskSpec`,
whose pattern is compiled into a :class:`CompiledMask`: one
:class:`MaskElement` per output character position.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple


# ---------------------------------------------------------------------------
# Element kinds
# ---------------------------------------------------------------------------

ELEMENT_KINDS = {
    "LITERAL",                # Fixed output character
    "LETTER",                 # l / L
    "ALPHANUMERIC",           # a / A
    "ANY",                    # c / C
    "HEX",                    # h / H
    "BINARY",                 # b / B
    "NUMBER",                 # 9 / 0
    "NUMBER_SIGNED",          # #  (digit, + or -)
    "DATE_SEPARATOR",         # /  (resolved from the locale)
    "HOUR_SEPARATOR",         # :  (resolved from the locale)
    "CHARSET",                # [|...]  optional set
    "CHARSET_FIXED",          # [...]   required set
    "CHARSET_NEGATED_FIXED",  # [!...]  required negated set
}

# Kinds whose output character is fixed by the mask.  These are the anchors
# used when lining up an already formatted value.
LITERAL_LIKE_KINDS = frozenset({"LITERAL", "DATE_SEPARATOR", "HOUR_SEPARATOR"})

# Kinds that honour the < / > case-shift regions.
CASED_KINDS = frozenset({"LETTER", "ALPHANUMERIC", "ANY", "HEX"})

CASE_TRANSFORMS = ("NONE", "UPPER", "LOWER")


# ---------------------------------------------------------------------------
# Locale provider
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LocaleSeparators:
    """
    The two locale-dependent characters a mask may reference.

    ``/`` in a pattern resolves to :attr:`date_separator` and ``:`` to
    :attr:`time_separator`.  The defaults are the invariant-culture values.
    """

    date_separator: str = "/"
    time_separator: str = ":"

    def __post_init__(self) -> None:
        for name in ("date_separator", "time_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")


INVARIANT_SEPARATORS = LocaleSeparators()


# ---------------------------------------------------------------------------
# Mask specification (splitter output)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MaskSpec:
    """The three fields of a ``pattern;saveFlag;spaceChar`` mask text."""

    pattern: str = ""
    save_formatted: bool = True
    space_placeholder: str = "_"

    def __post_init__(self) -> None:
        if not isinstance(self.space_placeholder, str) or len(self.space_placeholder) != 1:
            raise ValueError(
                f"space_placeholder must be a single character, got {self.space_placeholder!r}"
            )

    def to_mask_text(self) -> str:
        """
        Rebuild the ``pattern;flag;placeholder`` text.

        The third field cannot be escaped, so a ``;`` placeholder does not
        survive a re-split: ``split(spec.to_mask_text())`` falls back to the
        default placeholder in that case.
        """
        return f"{self.pattern};{'1' if self.save_formatted else '0'};{self.space_placeholder}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern,
            "save_formatted": self.save_formatted,
            "space_placeholder": self.space_placeholder,
        }


# ---------------------------------------------------------------------------
# Compiled elements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MaskElement:
    """
    One output position of a compiled mask.

    ``kind`` is one of :data:`ELEMENT_KINDS`.  ``literal`` is only set for
    ``LITERAL`` elements and ``members`` / ``negated`` only for the character
    set kinds.
    """

    kind: str
    required: bool = False
    case: str = "NONE"
    literal: Optional[str] = None
    members: FrozenSet[str] = field(default_factory=frozenset)
    negated: bool = False

    @property
    def is_literal_like(self) -> bool:
        return self.kind in LITERAL_LIKE_KINDS

    def literal_char(self, separators: LocaleSeparators = INVARIANT_SEPARATORS) -> str:
        """Return the fixed character this element prints."""
        if self.kind == "LITERAL":
            return self.literal  # type: ignore[return-value]
        if self.kind == "DATE_SEPARATOR":
            return separators.date_separator
        if self.kind == "HOUR_SEPARATOR":
            return separators.time_separator
        raise ValueError(f"{self.kind} element has no literal character")

    def __repr__(self) -> str:
        if self.kind == "LITERAL":
            return f"MaskElement(LITERAL {self.literal!r})"
        return (
            f"MaskElement(kind={self.kind!r}, required={self.required}, "
            f"case={self.case!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind, "required": self.required}
        if self.kind in CASED_KINDS:
            data["case"] = self.case
        if self.kind == "LITERAL":
            data["literal"] = self.literal
        if self.kind.startswith("CHARSET"):
            data["members"] = "".join(sorted(self.members))
            data["negated"] = self.negated
        return data


@dataclass(frozen=True)
class CompiledMask:
    """
    The ordered element sequence of a pattern.

    Element order is always left to right; :attr:`right_to_left` only changes
    how values are aligned against it.
    """

    elements: Tuple[MaskElement, ...]
    right_to_left: bool = False

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def data_slot_count(self) -> int:
        """Number of positions that take value characters."""
        return sum(1 for e in self.elements if not e.is_literal_like)

    def __repr__(self) -> str:
        return (
            f"CompiledMask(elements={len(self.elements)}, "
            f"right_to_left={self.right_to_left})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "right_to_left": self.right_to_left,
            "element_count": len(self.elements),
            "elements": [e.to_dict() for e in self.elements],
        }
