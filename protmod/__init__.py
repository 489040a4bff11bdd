"""protmod - Registry of protein modification definitions."""

# --- Definitions ---
from .categories import ModificationCategory, ModificationOccurrenceType
from .condition import AtomBond, Component, ModificationCondition
from .modification import ModificationBuilder, ProteinModification

# --- Registry ---
from .registry import ModificationRegistry

# --- Structure ---
from .attachment import Attachment, ResidueAttachment
from .structure import ParsedAtom, ParsedResidue, parse_residues

# --- Infrastructure ---
from .errors import ProtmodError, InputError, RegistrationError, CatalogError
from . import constants

__version__ = "0.1.0"

__all__ = [
    "ModificationCategory", "ModificationOccurrenceType",
    "AtomBond", "Component", "ModificationCondition",
    "ModificationBuilder", "ProteinModification",
    "ModificationRegistry",
    "Attachment", "ResidueAttachment",
    "ParsedAtom", "ParsedResidue", "parse_residues",
    "ProtmodError", "InputError", "RegistrationError", "CatalogError",
    "constants",
]
