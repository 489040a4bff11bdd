"""
Modification Catalog Reader

Reads protein modification catalogs in the ``ptm_list.xml`` layout:

    <ProteinModifications>
      <Entry>
        <Id>0001</Id>
        <Description>...</Description>
        <SystematicName>...</SystematicName>
        <Formula>...</Formula>
        <Category>attachment</Category>
        <Occurrence>natural</Occurrence>
        <CrossReference>
          <Source>RESID</Source><Id>AA0406</Id><Name>O-xylosyl-L-serine</Name>
        </CrossReference>
        <Condition>
          <Component component="1"><Id source="PDBCC">SER</Id></Component>
          <Component component="2"><Id source="PDBCC">XYS</Id></Component>
          <Bond><Atom component="1">OG</Atom><Atom component="2">O1</Atom></Bond>
        </Condition>
      </Entry>
    </ProteinModifications>

Entries are streamed with ``iterparse``: a catalog that turns malformed
half-way still yields every entry before the damage.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import BinaryIO, Dict, Iterator, List, Optional

from ..categories import ModificationCategory, ModificationOccurrenceType
from ..condition import AtomBond, Component, ModificationCondition
from ..constants import (
    XREF_SOURCE_PDBCC,
    XREF_SOURCE_PSIMOD,
    XREF_SOURCE_RESID,
    XREF_SOURCES,
)
from ..errors import CatalogError, InputError

# Cross-reference source -> (id field, name field)
_XREF_FIELDS = {
    XREF_SOURCE_PDBCC: ("pdbcc_id", "pdbcc_name"),
    XREF_SOURCE_RESID: ("resid_id", "resid_name"),
    XREF_SOURCE_PSIMOD: ("psimod_id", "psimod_name"),
}

# Builder setters applied for each entry, in order
_OPTIONAL_ENTRY_FIELDS = (
    "pdbcc_id", "pdbcc_name",
    "resid_id", "resid_name",
    "psimod_id", "psimod_name",
    "systematic_name", "description", "formula",
    "condition",
)


@dataclass
class CatalogEntry:
    """One parsed catalog entry, not yet registered."""
    id: str
    category: ModificationCategory
    occurrence_type: ModificationOccurrenceType
    description: Optional[str] = None
    systematic_name: Optional[str] = None
    formula: Optional[str] = None
    pdbcc_id: Optional[str] = None
    pdbcc_name: Optional[str] = None
    resid_id: Optional[str] = None
    resid_name: Optional[str] = None
    psimod_id: Optional[str] = None
    psimod_name: Optional[str] = None
    condition: Optional[ModificationCondition] = None


def _text(elem: Optional[ET.Element]) -> Optional[str]:
    if elem is None or elem.text is None:
        return None
    text = elem.text.strip()
    return text or None


def _flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in ("true", "yes", "1")


def _parse_condition(elem: ET.Element, entry_id: str) -> ModificationCondition:
    components: List[Component] = []
    index_by_label: Dict[str, int] = {}

    for comp_elem in elem.findall("Component"):
        label = comp_elem.get("component", str(len(components) + 1))
        pdbcc_id = _text(comp_elem.find("Id"))
        if pdbcc_id is None:
            raise CatalogError(f"Entry {entry_id}: condition component {label} has no Id")
        if label in index_by_label:
            raise CatalogError(f"Entry {entry_id}: duplicate condition component {label}")
        index_by_label[label] = len(components)
        components.append(Component(
            pdbcc_id=pdbcc_id,
            n_terminal=_flag(comp_elem.get("nTerminal")),
            c_terminal=_flag(comp_elem.get("cTerminal")),
        ))

    bonds: List[AtomBond] = []
    for bond_elem in elem.findall("Bond"):
        atoms = bond_elem.findall("Atom")
        if len(atoms) != 2:
            raise CatalogError(f"Entry {entry_id}: a bond needs exactly two atoms, got {len(atoms)}")
        ends = []
        for atom_elem in atoms:
            label = atom_elem.get("component")
            atom_name = _text(atom_elem)
            if label not in index_by_label or atom_name is None:
                raise CatalogError(
                    f"Entry {entry_id}: bond atom {atom_name!r} refers to unknown component {label!r}"
                )
            ends.append((index_by_label[label], atom_name))
        bonds.append(AtomBond(ends[0][0], ends[0][1], ends[1][0], ends[1][1]))

    try:
        return ModificationCondition(components=tuple(components), bonds=tuple(bonds))
    except InputError as e:
        raise CatalogError(f"Entry {entry_id}: {e}") from e


def parse_entry(elem: ET.Element) -> CatalogEntry:
    """Convert an ``<Entry>`` element into a ``CatalogEntry``."""
    entry_id = _text(elem.find("Id"))
    if entry_id is None:
        raise CatalogError("Catalog entry without Id")

    category_label = _text(elem.find("Category"))
    occurrence_label = _text(elem.find("Occurrence"))
    if category_label is None or occurrence_label is None:
        raise CatalogError(f"Entry {entry_id}: Category and Occurrence are required")
    try:
        category = ModificationCategory.from_label(category_label)
        occurrence_type = ModificationOccurrenceType.from_label(occurrence_label)
    except InputError as e:
        raise CatalogError(f"Entry {entry_id}: {e}") from e

    entry = CatalogEntry(
        id=entry_id,
        category=category,
        occurrence_type=occurrence_type,
        description=_text(elem.find("Description")),
        systematic_name=_text(elem.find("SystematicName")),
        formula=_text(elem.find("Formula")),
    )

    seen_sources = set()
    for xref in elem.findall("CrossReference"):
        source = _text(xref.find("Source"))
        if source not in _XREF_FIELDS:
            raise CatalogError(
                f"Entry {entry_id}: unknown cross-reference source {source!r}. "
                f"Must be one of: {', '.join(XREF_SOURCES)}"
            )
        id_field, name_field = _XREF_FIELDS[source]
        if source in seen_sources:
            raise CatalogError(f"Entry {entry_id}: more than one {source} cross-reference")
        seen_sources.add(source)
        xref_id = _text(xref.find("Id"))
        if xref_id is None:
            raise CatalogError(f"Entry {entry_id}: {source} cross-reference without Id")
        setattr(entry, id_field, xref_id)
        setattr(entry, name_field, _text(xref.find("Name")))

    condition_elem = elem.find("Condition")
    if condition_elem is not None:
        entry.condition = _parse_condition(condition_elem, entry_id)

    return entry


def iter_catalog_entries(stream: BinaryIO) -> Iterator[CatalogEntry]:
    """
    Stream catalog entries from an XML byte stream.

    Raises:
        xml.etree.ElementTree.ParseError: On malformed XML, after yielding
            every complete entry that preceded it.
        CatalogError: On a well-formed entry with invalid content.
    """
    for _, elem in ET.iterparse(stream, events=("end",)):
        if elem.tag == "Entry":
            yield parse_entry(elem)
            elem.clear()


def register_entry(entry: CatalogEntry, registry):
    """Register ``entry`` through the registry's builder path."""
    builder = registry.register(entry.id, entry.category, entry.occurrence_type)
    for field in _OPTIONAL_ENTRY_FIELDS:
        value = getattr(entry, field)
        if value is not None:
            getattr(builder, field)(value)
    return builder.as_modification()


def register_catalog(stream: BinaryIO, registry) -> int:
    """
    Register every entry of a catalog into ``registry``.

    Stops at the first failing entry; earlier entries stay registered.

    Returns:
        Number of modifications registered.
    """
    count = 0
    for entry in iter_catalog_entries(stream):
        register_entry(entry, registry)
        count += 1
    return count
