"""Runtime/default constants for catalog loading, geometry and logging."""

# Bundled catalog
CATALOG_DATA_PACKAGE = "protmod.data"
DEFAULT_CATALOG_RESOURCE = "ptm_list.xml"

# Cross-reference sources understood by the catalog reader
XREF_SOURCE_PDBCC = "PDBCC"
XREF_SOURCE_RESID = "RESID"
XREF_SOURCE_PSIMOD = "PSI-MOD"
XREF_SOURCES = (XREF_SOURCE_PDBCC, XREF_SOURCE_RESID, XREF_SOURCE_PSIMOD)

# Attachment geometry
DEFAULT_BOND_TOLERANCE = 0.4    # Angstrom slack over the summed covalent radii

# CLI logging
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
