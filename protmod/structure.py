"""
Minimal Structural Model.

Just enough of a residue/atom model to describe where a modification sits
in a structure: atoms parsed from PDB ATOM/HETATM records, grouped into
residues (amino acids and attached groups alike).

Usage:
    from protmod.structure import parse_residues

    with open("1abc.pdb") as f:
        residues = parse_residues(f)
    ser = residues[0]
    og = ser.atom("OG")
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import DEFAULT_ELEMENT, TWO_LETTER_ELEMENTS


# ============================================================================
# Data Classes for Parsed Atoms
# ============================================================================

@dataclass
class ParsedAtom:
    """Single parsed atom from a PDB file."""
    record_type: str        # 'ATOM' or 'HETATM'
    atom_name: str          # e.g., 'CA', 'OG', 'C1'
    res_name: str           # e.g., 'SER', 'NAG'
    res_num: int            # Residue number
    chain_id: str           # Chain identifier
    coords: Tuple[float, float, float]
    element: str            # Element symbol (C, N, O, S, etc.)
    insertion_code: str = '' # Insertion code if any


@dataclass(eq=False)
class ParsedResidue:
    """A residue or attached group with its atoms."""
    chain_id: str
    res_num: int
    res_name: str
    insertion_code: str = ''
    is_hetero: bool = False
    atoms: List[ParsedAtom] = field(default_factory=list)

    def atom(self, atom_name: str) -> Optional[ParsedAtom]:
        """Return the atom called ``atom_name``, or None."""
        for a in self.atoms:
            if a.atom_name == atom_name:
                return a
        return None

    @property
    def key(self) -> Tuple[str, int, str]:
        return (self.chain_id, self.res_num, self.insertion_code)


# ============================================================================
# Low-level Parsing Functions
# ============================================================================

def is_atom_record(line: str) -> bool:
    """Check if a PDB line is an ATOM record."""
    if len(line) < 6:
        return False
    return line[:6].strip() == 'ATOM'


def is_hetatm_record(line: str) -> bool:
    """Check if a PDB line is a HETATM record."""
    if len(line) < 6:
        return False
    return line[:6].strip() == 'HETATM'


def parse_pdb_line(line: str) -> ParsedAtom:
    """
    Parse a PDB ATOM/HETATM line into ParsedAtom.

    PDB format columns:
        1-6:   Record type (ATOM/HETATM)
        13-16: Atom name
        18-20: Residue name
        22:    Chain identifier
        23-26: Residue sequence number
        27:    Code for insertion of residues
        31-54: X, Y, Z coordinates
        77-78: Element symbol
    """
    record_type = line[:6].strip()
    atom_name = line[12:16].strip()
    res_name = line[17:20].strip()
    chain_id = line[21] if len(line) > 21 else ' '
    insertion_code = line[26] if len(line) > 26 and line[26] != ' ' else ''

    try:
        res_num = int(line[22:26]) if len(line) > 26 else 0
    except ValueError:
        res_num = 0

    element = ''
    if len(line) > 77:
        element = line[76:78].strip().upper()
    if not element and atom_name:
        element = _infer_element(atom_name)

    try:
        x = float(line[30:38])
        y = float(line[38:46])
        z = float(line[46:54])
        coords = (x, y, z)
    except (ValueError, IndexError):
        coords = (0.0, 0.0, 0.0)

    return ParsedAtom(
        record_type=record_type,
        atom_name=atom_name,
        res_name=res_name,
        res_num=res_num,
        chain_id=chain_id,
        coords=coords,
        element=element,
        insertion_code=insertion_code,
    )


def _infer_element(atom_name: str) -> str:
    """Infer element symbol from atom name."""
    element = ''.join(c for c in atom_name if c.isalpha())
    if not element:
        return DEFAULT_ELEMENT

    if len(element) >= 2 and element[:2].upper() in TWO_LETTER_ELEMENTS:
        return element[:2].upper()

    return element[0].upper()


def parse_residues(lines: Iterable[str]) -> List[ParsedResidue]:
    """
    Group ATOM/HETATM records into residues, in file order.

    Residues are keyed by (chain, number, insertion code, name).
    """
    residues: Dict[Tuple[str, int, str, str], ParsedResidue] = {}
    for line in lines:
        if not (is_atom_record(line) or is_hetatm_record(line)):
            continue
        atom = parse_pdb_line(line)
        key = (atom.chain_id, atom.res_num, atom.insertion_code, atom.res_name)
        residue = residues.get(key)
        if residue is None:
            residue = ParsedResidue(
                chain_id=atom.chain_id,
                res_num=atom.res_num,
                res_name=atom.res_name,
                insertion_code=atom.insertion_code,
                is_hetero=atom.record_type == 'HETATM',
            )
            residues[key] = residue
        residue.atoms.append(atom)
    return list(residues.values())
