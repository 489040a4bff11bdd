"""Shared test fixtures for protmod."""

import io

import pytest

from protmod import ModificationRegistry


MINI_CATALOG = b"""<?xml version="1.0" encoding="UTF-8"?>
<ProteinModifications>
  <Entry>
    <Id>T001</Id>
    <Formula>C 3 H 6 N 1 O 5 P 1</Formula>
    <Category>modified residue</Category>
    <Occurrence>natural</Occurrence>
    <CrossReference><Source>RESID</Source><Id>AA9001</Id><Name>test phosphoserine</Name></CrossReference>
    <CrossReference><Source>PSI-MOD</Source><Id>MOD:90001</Id></CrossReference>
    <CrossReference><Source>PDBCC</Source><Id>SEP</Id></CrossReference>
  </Entry>
  <Entry>
    <Id>T002</Id>
    <Category>attachment</Category>
    <Occurrence>artifact</Occurrence>
    <CrossReference><Source>PDBCC</Source><Id>SEP</Id></CrossReference>
    <Condition>
      <Component component="1"><Id source="PDBCC">SER</Id></Component>
      <Component component="2"><Id source="PDBCC">PO4</Id></Component>
      <Bond><Atom component="1">OG</Atom><Atom component="2">P</Atom></Bond>
    </Condition>
  </Entry>
</ProteinModifications>
"""


def opener_for(data: bytes):
    """Opener returning ``data`` for any resource name."""
    def _open(name):
        return io.BytesIO(data)
    return _open


@pytest.fixture
def make_registry():
    """Factory: registry whose catalog resource holds the given bytes."""
    def _make(data: bytes) -> ModificationRegistry:
        return ModificationRegistry(catalog="test.xml", opener=opener_for(data))
    return _make


@pytest.fixture
def empty_registry() -> ModificationRegistry:
    """Registry without a bundled catalog."""
    return ModificationRegistry(catalog=None)


@pytest.fixture
def mini_registry() -> ModificationRegistry:
    """Registry whose catalog is the two-entry MINI_CATALOG."""
    return ModificationRegistry(catalog="mini.xml", opener=opener_for(MINI_CATALOG))


@pytest.fixture
def bundled_registry() -> ModificationRegistry:
    """Registry loading the catalog shipped with protmod."""
    return ModificationRegistry()


@pytest.fixture
def mini_catalog_bytes() -> bytes:
    return MINI_CATALOG
