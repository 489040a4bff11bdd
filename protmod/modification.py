"""
Protein Modification Definitions

A ``ProteinModification`` describes one kind of biochemical modification
(e.g. O-phospho-L-serine) together with its cross-references into RESID,
PSI-MOD and the PDB Chemical Component Dictionary.

Definitions are never constructed directly. ``ModificationRegistry.register``
creates them with their required fields and hands back a
``ModificationBuilder`` for the optional ones:

    registry.register("0001", ModificationCategory.ATTACHMENT,
                      ModificationOccurrenceType.NATURAL) \\
        .resid_id("AA0406") \\
        .resid_name("O-xylosyl-L-serine")
"""

from __future__ import annotations

from typing import Optional

from .categories import ModificationCategory, ModificationOccurrenceType
from .condition import ModificationCondition
from .errors import InputError, RegistrationError

# Optional field -> label used in error messages
OPTIONAL_FIELDS = {
    "pdbcc_id": "PDBCC ID",
    "pdbcc_name": "PDBCC name",
    "resid_id": "RESID ID",
    "resid_name": "RESID name",
    "psimod_id": "PSI-MOD ID",
    "psimod_name": "PSI-MOD name",
    "systematic_name": "Systematic name",
    "description": "Description",
    "formula": "Formula",
    "condition": "Condition",
}


class ProteinModification:
    """
    A registered protein modification.

    ``id``, ``category`` and ``occurrence_type`` are fixed at registration.
    Every other attribute is ``None`` until set once through the builder.
    Equality and hashing are by identity; ids are unique within a registry.
    """

    __slots__ = ("_id", "_category", "_occurrence_type") + tuple(
        "_" + name for name in OPTIONAL_FIELDS
    )

    def __init__(
        self,
        mod_id: str,
        category: ModificationCategory,
        occurrence_type: ModificationOccurrenceType,
    ):
        self._id = mod_id
        self._category = category
        self._occurrence_type = occurrence_type
        for name in OPTIONAL_FIELDS:
            setattr(self, "_" + name, None)

    @property
    def id(self) -> str:
        return self._id

    @property
    def category(self) -> ModificationCategory:
        return self._category

    @property
    def occurrence_type(self) -> ModificationOccurrenceType:
        return self._occurrence_type

    @property
    def pdbcc_id(self) -> Optional[str]:
        """Protein Data Bank Chemical Component ID."""
        return self._pdbcc_id

    @property
    def pdbcc_name(self) -> Optional[str]:
        """Protein Data Bank Chemical Component name."""
        return self._pdbcc_name

    @property
    def resid_id(self) -> Optional[str]:
        return self._resid_id

    @property
    def resid_name(self) -> Optional[str]:
        return self._resid_name

    @property
    def psimod_id(self) -> Optional[str]:
        return self._psimod_id

    @property
    def psimod_name(self) -> Optional[str]:
        return self._psimod_name

    @property
    def systematic_name(self) -> Optional[str]:
        return self._systematic_name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def formula(self) -> Optional[str]:
        """Formula of the modified residue."""
        return self._formula

    @property
    def condition(self) -> Optional[ModificationCondition]:
        return self._condition

    def __repr__(self) -> str:
        return (
            f"ProteinModification(id={self._id!r}, "
            f"category={self._category.name}, "
            f"occurrence_type={self._occurrence_type.name})"
        )


class ModificationBuilder:
    """
    Sets the optional attributes of one freshly registered modification.

    Each setter may be called at most once per modification and returns the
    builder so calls can be chained. Setting an identifier that the registry
    indexes (PDBCC, RESID, PSI-MOD) also updates that index. A builder is
    bound to a single modification and should be dropped once
    ``as_modification()`` has been called.
    """

    def __init__(self, registry, current: ProteinModification):
        if current is None:
            raise InputError("A builder needs a modification to work on.")
        self._registry = registry
        self._current = current

    def as_modification(self) -> ProteinModification:
        """Return the modification under construction."""
        return self._current

    def pdbcc_id(self, pdbcc_id: str) -> "ModificationBuilder":
        """Set the PDBCC ID. Several modifications may share one."""
        return self._apply("pdbcc_id", pdbcc_id)

    def pdbcc_name(self, pdbcc_name: str) -> "ModificationBuilder":
        return self._apply("pdbcc_name", pdbcc_name)

    def resid_id(self, resid_id: str) -> "ModificationBuilder":
        """
        Set the RESID ID.

        Raises:
            RegistrationError: If the RESID ID is already set on this
                modification or belongs to another registered modification.
        """
        return self._apply("resid_id", resid_id)

    def resid_name(self, resid_name: str) -> "ModificationBuilder":
        return self._apply("resid_name", resid_name)

    def psimod_id(self, psimod_id: str) -> "ModificationBuilder":
        """
        Set the PSI-MOD ID.

        Raises:
            RegistrationError: If the PSI-MOD ID is already set on this
                modification or belongs to another registered modification.
        """
        return self._apply("psimod_id", psimod_id)

    def psimod_name(self, psimod_name: str) -> "ModificationBuilder":
        return self._apply("psimod_name", psimod_name)

    def systematic_name(self, systematic_name: str) -> "ModificationBuilder":
        return self._apply("systematic_name", systematic_name)

    def description(self, description: str) -> "ModificationBuilder":
        return self._apply("description", description)

    def formula(self, formula: str) -> "ModificationBuilder":
        return self._apply("formula", formula)

    def condition(self, condition: ModificationCondition) -> "ModificationBuilder":
        if condition is not None and not isinstance(condition, ModificationCondition):
            raise InputError(
                f"condition must be a ModificationCondition, got {type(condition)!r}"
            )
        return self._apply("condition", condition)

    def _apply(self, field: str, value) -> "ModificationBuilder":
        label = OPTIONAL_FIELDS[field]
        if value is None:
            raise InputError(f"{label} must not be None.")
        if field != "condition" and not isinstance(value, str):
            raise InputError(f"{label} must be a string, got {type(value)!r}")
        if getattr(self._current, "_" + field) is not None:
            raise RegistrationError(f"{label} has been set for modification {self._current.id}.")

        # Check first, then assign, then index: a failed check leaves
        # both the modification and the registry untouched.
        self._registry._check_available(field, value)
        setattr(self._current, "_" + field, value)
        self._registry._index_field(self._current, field)
        return self
