"""
Modification Attachments

An ``Attachment`` describes one occurrence of a modification in a
structure: the modification type, the amino acid it sits on, the attached
chemical group and the two atoms forming the linkage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from rdkit import Chem

from .constants import DEFAULT_BOND_TOLERANCE, DEFAULT_COVALENT_RADIUS
from .modification import ProteinModification
from .structure import ParsedAtom, ParsedResidue


def covalent_radius(element: str) -> float:
    """
    Covalent radius (Angstrom) of an element symbol, any capitalization.

    Symbols RDKit's periodic table does not know fall back to
    ``DEFAULT_COVALENT_RADIUS``.
    """
    symbol = element.strip().capitalize()
    if not symbol:
        return DEFAULT_COVALENT_RADIUS
    table = Chem.GetPeriodicTable()
    try:
        atomic_number = table.GetAtomicNumber(symbol)
    except RuntimeError:
        # RDKit raises on unknown element symbols
        return DEFAULT_COVALENT_RADIUS
    if atomic_number < 1:
        return DEFAULT_COVALENT_RADIUS
    return float(table.GetRcovalent(atomic_number))


class Attachment(ABC):
    """Read-only view of a modification attached to an amino acid."""

    @property
    @abstractmethod
    def modification(self) -> ProteinModification:
        """The modification occurring on the residue."""

    @property
    @abstractmethod
    def modified_residue(self) -> ParsedResidue:
        """The amino acid the group is attached to."""

    @property
    @abstractmethod
    def attached_group(self) -> ParsedResidue:
        """The attached chemical group."""

    @property
    @abstractmethod
    def atom_on_residue(self) -> ParsedAtom:
        """Attachment point on the amino acid."""

    @property
    @abstractmethod
    def atom_on_attached_group(self) -> ParsedAtom:
        """Attachment point on the attached group."""

    def bond_length(self) -> float:
        """Distance between the two attachment atoms."""
        a = np.asarray(self.atom_on_residue.coords, dtype=float)
        b = np.asarray(self.atom_on_attached_group.coords, dtype=float)
        return float(np.linalg.norm(a - b))

    def is_covalent(self, tolerance: float = DEFAULT_BOND_TOLERANCE) -> bool:
        """True if the attachment atoms are within covalent bonding distance."""
        limit = (
            covalent_radius(self.atom_on_residue.element)
            + covalent_radius(self.atom_on_attached_group.element)
            + tolerance
        )
        return self.bond_length() <= limit

    def matches_condition(self) -> bool:
        """
        Check residue names and atom names against the modification's condition.

        True when some bond of the condition links a component named like the
        modified residue (at ``atom_on_residue``) to a component named like the
        attached group (at ``atom_on_attached_group``). Modifications without
        a condition never match.
        """
        condition = self.modification.condition
        if condition is None:
            return False
        ids = condition.component_ids
        res_end = (self.modified_residue.res_name, self.atom_on_residue.atom_name)
        group_end = (self.attached_group.res_name, self.atom_on_attached_group.atom_name)
        for bond in condition.bonds:
            end1 = (ids[bond.component1], bond.atom1)
            end2 = (ids[bond.component2], bond.atom2)
            if (end1, end2) in ((res_end, group_end), (group_end, res_end)):
                return True
        return False


class ResidueAttachment(Attachment):
    """Attachment assembled from already-parsed residues and atoms."""

    def __init__(
        self,
        modification: ProteinModification,
        modified_residue: ParsedResidue,
        attached_group: ParsedResidue,
        atom_on_residue: ParsedAtom,
        atom_on_attached_group: ParsedAtom,
    ):
        self._modification = modification
        self._residue = modified_residue
        self._group = attached_group
        self._atom_on_residue = atom_on_residue
        self._atom_on_group = atom_on_attached_group

    @property
    def modification(self) -> ProteinModification:
        return self._modification

    @property
    def modified_residue(self) -> ParsedResidue:
        return self._residue

    @property
    def attached_group(self) -> ParsedResidue:
        return self._group

    @property
    def atom_on_residue(self) -> ParsedAtom:
        return self._atom_on_residue

    @property
    def atom_on_attached_group(self) -> ParsedAtom:
        return self._atom_on_group

    def __repr__(self) -> str:
        return (
            f"ResidueAttachment({self._modification.id}: "
            f"{self._residue.res_name}{self._residue.res_num}.{self._atom_on_residue.atom_name}"
            f" - {self._group.res_name}{self._group.res_num}.{self._atom_on_group.atom_name})"
        )
