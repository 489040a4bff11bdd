"""Constants used across protmod."""

from .runtime import (
    CATALOG_DATA_PACKAGE,
    DEFAULT_CATALOG_RESOURCE,
    XREF_SOURCE_PDBCC,
    XREF_SOURCE_RESID,
    XREF_SOURCE_PSIMOD,
    XREF_SOURCES,
    DEFAULT_BOND_TOLERANCE,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
)
from .elements import (
    TWO_LETTER_ELEMENTS,
    DEFAULT_ELEMENT,
    DEFAULT_COVALENT_RADIUS,
)
