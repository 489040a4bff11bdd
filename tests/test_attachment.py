"""Tests for protmod/attachment.py and protmod/structure.py."""

import pytest

from protmod import (
    Attachment,
    ModificationCategory,
    ModificationOccurrenceType,
    ResidueAttachment,
    parse_residues,
)
from protmod.attachment import covalent_radius
from protmod.constants import DEFAULT_COVALENT_RADIUS
from protmod.structure import is_atom_record, is_hetatm_record, parse_pdb_line


def _line(record, serial, name, res, chain, num, x, y, z, elem=""):
    return (
        f"{record:<6s}{serial:5d}  {name:<4s}{res:3s} {chain}{num:4d}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}  1.00  0.00          {elem:>2s}\n"
    )


@pytest.fixture
def glycosylated_serine():
    """SER 5 carrying a bonded NAG 101, plus an unbonded NAG 102."""
    return [
        "REMARK   1 O-GlcNAc test\n",
        _line("ATOM", 1, "N", "SER", "A", 5, 0.000, 0.000, 0.000, "N"),
        _line("ATOM", 2, "CA", "SER", "A", 5, 1.460, 0.000, 0.000, "C"),
        _line("ATOM", 3, "CB", "SER", "A", 5, 2.000, 1.400, 0.000, "C"),
        _line("ATOM", 4, "OG", "SER", "A", 5, 3.400, 1.400, 0.000, "O"),
        _line("HETATM", 5, "C1", "NAG", "A", 101, 4.830, 1.400, 0.000, "C"),
        _line("HETATM", 6, "O5", "NAG", "A", 101, 5.500, 2.600, 0.000, "O"),
        _line("HETATM", 7, "C1", "NAG", "A", 102, 8.000, 1.400, 0.000, "C"),
        "END\n",
    ]


class TestStructure:
    def test_record_types(self):
        assert is_atom_record(_line("ATOM", 1, "N", "SER", "A", 1, 0, 0, 0, "N"))
        assert is_hetatm_record(_line("HETATM", 1, "C1", "NAG", "A", 1, 0, 0, 0, "C"))
        assert not is_atom_record("END")

    def test_parse_line(self):
        atom = parse_pdb_line(_line("ATOM", 4, "OG", "SER", "A", 5, 3.4, 1.4, 0.0, "O"))
        assert atom.atom_name == "OG"
        assert atom.res_name == "SER"
        assert atom.res_num == 5
        assert atom.chain_id == "A"
        assert atom.element == "O"
        assert atom.coords == pytest.approx((3.4, 1.4, 0.0))

    def test_element_inferred_without_column(self):
        line = _line("HETATM", 1, "SE", "MSE", "A", 1, 0, 0, 0).rstrip()
        assert parse_pdb_line(line).element == "SE"
        line = _line("ATOM", 1, "ND2", "ASN", "A", 1, 0, 0, 0).rstrip()
        assert parse_pdb_line(line).element == "N"

    def test_parse_residues(self, glycosylated_serine):
        residues = parse_residues(glycosylated_serine)
        assert [(r.res_name, r.res_num) for r in residues] == [("SER", 5), ("NAG", 101), ("NAG", 102)]
        ser, nag, _ = residues
        assert ser.is_hetero is False
        assert nag.is_hetero is True
        assert len(ser.atoms) == 4
        assert ser.atom("OG").coords == pytest.approx((3.4, 1.4, 0.0))
        assert ser.atom("SG") is None
        assert ser.key == ("A", 5, "")


class TestCovalentRadius:
    def test_known_elements(self):
        assert 0.6 < covalent_radius("C") < 0.9
        assert covalent_radius("SE") == pytest.approx(covalent_radius("Se"))
        assert covalent_radius("S") > covalent_radius("O")

    @pytest.mark.parametrize("symbol", ["HG", "Cd", "pt", "AS"])
    def test_heavier_elements_use_periodic_table(self, symbol):
        radius = covalent_radius(symbol)
        assert radius != DEFAULT_COVALENT_RADIUS
        assert radius > 1.0

    @pytest.mark.parametrize("symbol", ["XX", "", "  "])
    def test_unknown_element(self, symbol):
        assert covalent_radius(symbol) == DEFAULT_COVALENT_RADIUS


class TestResidueAttachment:
    @pytest.fixture
    def parts(self, glycosylated_serine, bundled_registry):
        ser, nag, far_nag = parse_residues(glycosylated_serine)
        return bundled_registry, ser, nag, far_nag

    def test_is_attachment(self, parts):
        registry, ser, nag, _ = parts
        mod = registry.get_by_resid_id("AA0154")
        att = ResidueAttachment(mod, ser, nag, ser.atom("OG"), nag.atom("C1"))
        assert isinstance(att, Attachment)
        assert att.modification is mod
        assert att.modified_residue is ser
        assert att.attached_group is nag
        assert att.atom_on_residue is ser.atom("OG")
        assert att.atom_on_attached_group is nag.atom("C1")

    def test_read_only(self, parts):
        registry, ser, nag, _ = parts
        att = ResidueAttachment(registry.get_by_id("0011"), ser, nag, ser.atom("OG"), nag.atom("C1"))
        with pytest.raises(AttributeError):
            att.modified_residue = nag

    def test_bond_geometry(self, parts):
        registry, ser, nag, far_nag = parts
        mod = registry.get_by_id("0011")
        bonded = ResidueAttachment(mod, ser, nag, ser.atom("OG"), nag.atom("C1"))
        assert bonded.bond_length() == pytest.approx(1.43)
        assert bonded.is_covalent()

        distant = ResidueAttachment(mod, ser, far_nag, ser.atom("OG"), far_nag.atom("C1"))
        assert distant.bond_length() == pytest.approx(4.6)
        assert not distant.is_covalent()
        assert distant.is_covalent(tolerance=5.0)

    def test_matches_condition(self, parts):
        registry, ser, nag, _ = parts
        o_glcnac = registry.get_by_id("0011")
        n_glcnac = registry.get_by_id("0010")
        assert ResidueAttachment(o_glcnac, ser, nag, ser.atom("OG"), nag.atom("C1")).matches_condition()
        assert not ResidueAttachment(n_glcnac, ser, nag, ser.atom("OG"), nag.atom("C1")).matches_condition()
        assert not ResidueAttachment(o_glcnac, ser, nag, ser.atom("CB"), nag.atom("C1")).matches_condition()

    def test_condition_missing(self, parts, empty_registry):
        _, ser, nag, _ = parts
        bare = empty_registry.register(
            "X", ModificationCategory.ATTACHMENT, ModificationOccurrenceType.NATURAL
        ).as_modification()
        att = ResidueAttachment(bare, ser, nag, ser.atom("OG"), nag.atom("C1"))
        assert att.matches_condition() is False

    def test_repr(self, parts):
        registry, ser, nag, _ = parts
        att = ResidueAttachment(registry.get_by_id("0011"), ser, nag, ser.atom("OG"), nag.atom("C1"))
        assert repr(att) == "ResidueAttachment(0011: SER5.OG - NAG101.C1)"
