"""
Element Constants.

Element symbols and atom-name conventions needed to turn PDB atom records
into elements for covalent-bond checks on modification attachments.
"""

# =============================================================================
# Element Symbols
# =============================================================================

# Two-letter elements that can be mistaken for atom names (e.g. CA = calcium
# vs. alpha carbon). Only used when the element column is missing.
TWO_LETTER_ELEMENTS = ['MG', 'ZN', 'FE', 'MN', 'CU', 'CO', 'NI', 'NA', 'CL', 'BR', 'SE']

# Fallback when an element is unknown: carbon
DEFAULT_ELEMENT = 'C'
DEFAULT_COVALENT_RADIUS = 0.76
