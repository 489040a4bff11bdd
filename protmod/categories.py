"""
Modification Classification

Enumerations describing what kind of chemical change a protein
modification is, and how it arises.
"""

from __future__ import annotations

from enum import Enum

from .errors import InputError


class ModificationCategory(Enum):
    """
    Structural category of a protein modification.

    Each member's value is the label used in modification catalogs.
    """

    ATTACHMENT = ("attachment", "Attachment of a chemical group to a residue")
    CHEMICAL_MODIFICATION = ("modified residue", "Chemical modification of a residue")
    CROSS_LINK_1 = ("crosslink1", "Cross link involving one residue")
    CROSS_LINK_2 = ("crosslink2", "Cross link involving two residues")
    CROSS_LINK_3 = ("crosslink3", "Cross link involving three residues")
    CROSS_LINK_4 = ("crosslink4", "Cross link involving four residues")
    CROSS_LINK_5 = ("crosslink5", "Cross link involving five residues")
    CROSS_LINK_6 = ("crosslink6", "Cross link involving six residues")
    CROSS_LINK_7 = ("crosslink7", "Cross link involving seven residues")
    CROSS_LINK_8_OR_LARGE = ("crosslink8", "Cross link involving eight or more residues")
    UNKNOWN = ("unknown", "Unknown")

    def __init__(self, label: str, description: str):
        self.label = label
        self.description = description

    def is_cross_link(self) -> bool:
        return self.name.startswith("CROSS_LINK")

    @classmethod
    def from_label(cls, label: str) -> "ModificationCategory":
        """Look up a category by its catalog label (case-insensitive)."""
        return _lookup_label(cls, label)


class ModificationOccurrenceType(Enum):
    """How a protein modification comes about."""

    NATURAL = ("natural", "Natural occurring modification")
    HYPOTHETICAL = ("hypothetical", "Hypothetical modification")
    ARTIFACT = ("artifact", "Artifact introduced by sample handling")

    def __init__(self, label: str, description: str):
        self.label = label
        self.description = description

    @classmethod
    def from_label(cls, label: str) -> "ModificationOccurrenceType":
        """Look up an occurrence type by its catalog label (case-insensitive)."""
        return _lookup_label(cls, label)


def _lookup_label(enum_cls, label: str):
    if not isinstance(label, str):
        raise InputError(f"{enum_cls.__name__} label must be a string, got {type(label)!r}")
    key = label.strip().lower()
    for member in enum_cls:
        if member.label == key:
            return member
    raise InputError(
        f"Unknown {enum_cls.__name__} label: '{label}'. "
        f"Must be one of: {', '.join(m.label for m in enum_cls)}"
    )
