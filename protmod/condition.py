"""Structural conditions under which a protein modification applies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InputError


@dataclass(frozen=True)
class Component:
    """A chemical component taking part in a modification."""
    pdbcc_id: str           # e.g. 'SER', 'XYS'
    n_terminal: bool = False
    c_terminal: bool = False


@dataclass(frozen=True)
class AtomBond:
    """
    A linkage between two atoms of a modification's components.

    Component indices are 0-based positions in ``ModificationCondition.components``.
    """
    component1: int
    atom1: str
    component2: int
    atom2: str


@dataclass(frozen=True)
class ModificationCondition:
    """Components involved in a modification and the bonds linking them."""
    components: Tuple[Component, ...]
    bonds: Tuple[AtomBond, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, "components", tuple(self.components))
        object.__setattr__(self, "bonds", tuple(self.bonds))

        if not self.components:
            raise InputError("A modification condition needs at least one component.")
        n = len(self.components)
        for bond in self.bonds:
            for index in (bond.component1, bond.component2):
                if not 0 <= index < n:
                    raise InputError(
                        f"Bond {bond.atom1}-{bond.atom2} references component {index}, "
                        f"but the condition has {n} component(s)."
                    )

    @property
    def component_ids(self) -> Tuple[str, ...]:
        return tuple(c.pdbcc_id for c in self.components)
