"""Tests for protmod/categories.py and protmod/condition.py."""

import pytest

from protmod import (
    AtomBond,
    Component,
    InputError,
    ModificationCategory,
    ModificationCondition,
    ModificationOccurrenceType,
)


class TestModificationCategory:
    def test_from_label(self):
        assert ModificationCategory.from_label("attachment") is ModificationCategory.ATTACHMENT
        assert ModificationCategory.from_label("modified residue") is ModificationCategory.CHEMICAL_MODIFICATION
        assert ModificationCategory.from_label(" CROSSLINK2 ") is ModificationCategory.CROSS_LINK_2

    def test_labels_unique(self):
        labels = [c.label for c in ModificationCategory]
        assert len(labels) == len(set(labels))

    def test_unknown_label(self):
        with pytest.raises(InputError, match="Unknown ModificationCategory"):
            ModificationCategory.from_label("glycation")

    def test_non_string_label(self):
        with pytest.raises(InputError):
            ModificationCategory.from_label(None)

    def test_is_cross_link(self):
        assert ModificationCategory.CROSS_LINK_1.is_cross_link()
        assert ModificationCategory.CROSS_LINK_8_OR_LARGE.is_cross_link()
        assert not ModificationCategory.ATTACHMENT.is_cross_link()
        assert not ModificationCategory.UNKNOWN.is_cross_link()

    def test_description(self):
        assert "two residues" in ModificationCategory.CROSS_LINK_2.description


class TestModificationOccurrenceType:
    @pytest.mark.parametrize("label, member", [
        ("natural", ModificationOccurrenceType.NATURAL),
        ("Hypothetical", ModificationOccurrenceType.HYPOTHETICAL),
        ("artifact", ModificationOccurrenceType.ARTIFACT),
    ])
    def test_from_label(self, label, member):
        assert ModificationOccurrenceType.from_label(label) is member

    def test_unknown_label(self):
        with pytest.raises(InputError, match="natural, hypothetical, artifact"):
            ModificationOccurrenceType.from_label("synthetic")


class TestModificationCondition:
    def test_lists_become_tuples(self):
        condition = ModificationCondition(
            components=[Component("SER"), Component("XYS")],
            bonds=[AtomBond(0, "OG", 1, "O1")],
        )
        assert isinstance(condition.components, tuple)
        assert isinstance(condition.bonds, tuple)
        assert condition.component_ids == ("SER", "XYS")

    def test_hashable_and_equal_by_value(self):
        a = ModificationCondition(components=(Component("SEP"),))
        b = ModificationCondition(components=[Component("SEP")])
        assert a == b
        assert hash(a) == hash(b)

    def test_requires_component(self):
        with pytest.raises(InputError, match="at least one component"):
            ModificationCondition(components=())

    def test_bond_index_checked(self):
        with pytest.raises(InputError, match="references component 2"):
            ModificationCondition(
                components=[Component("CYS"), Component("CYS")],
                bonds=[AtomBond(0, "SG", 2, "SG")],
            )

    def test_frozen(self):
        condition = ModificationCondition(components=[Component("SEP")])
        with pytest.raises(AttributeError):
            condition.components = ()
