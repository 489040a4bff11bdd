#!/usr/bin/env python
"""
Look up protein modifications in the bundled catalog.

Usage:
    protmod-lookup --id 0001
    protmod-lookup --resid AA0037
    protmod-lookup --psimod MOD:00046
    protmod-lookup --pdbcc NAG
    protmod-lookup --list
    protmod-lookup --list --catalog /data/my_ptm_list.xml
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from protmod.constants import LOG_DATE_FORMAT, LOG_FORMAT
from protmod.modification import ProteinModification
from protmod.registry import ModificationRegistry

logger = logging.getLogger(__name__)

# Columns printed for each modification
FIELDS = (
    "id", "category", "occurrence_type",
    "resid_id", "resid_name",
    "psimod_id", "psimod_name",
    "pdbcc_id", "pdbcc_name",
    "formula", "systematic_name", "description",
)


def format_modification(mod: ProteinModification) -> str:
    """Multi-line ``key: value`` block for one modification; unset fields are skipped."""
    lines = []
    for name in FIELDS:
        value = getattr(mod, name)
        if value is None:
            continue
        if name in ("category", "occurrence_type"):
            value = value.label
        lines.append(f"{name}: {value}")
    if mod.condition is not None:
        lines.append(f"components: {', '.join(mod.condition.component_ids)}")
    return "\n".join(lines)


def format_table(mods: Iterable[ProteinModification]) -> str:
    """One tab-separated line per modification, sorted by id."""
    rows = []
    for mod in sorted(mods, key=lambda m: m.id):
        rows.append("\t".join([
            mod.id,
            mod.category.label,
            mod.occurrence_type.label,
            mod.resid_id or "-",
            mod.psimod_id or "-",
            mod.pdbcc_id or "-",
            mod.resid_name or mod.psimod_name or mod.pdbcc_name or "-",
        ]))
    return "\n".join(rows)


def build_registry(catalog_path: Optional[str]) -> ModificationRegistry:
    registry = ModificationRegistry()
    if catalog_path:
        logger.info(f"Loading extra catalog {catalog_path}")
        with open(catalog_path, "rb") as f:
            count = registry.load_catalog(f)
        logger.info(f"Registered {count} modification(s) from {catalog_path}")
    return registry


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Look up protein modifications by id, RESID, PSI-MOD or PDBCC ID'
    )
    query = parser.add_mutually_exclusive_group(required=True)
    query.add_argument('--id', help='Modification id')
    query.add_argument('--resid', help='RESID ID (e.g. AA0037)')
    query.add_argument('--psimod', help='PSI-MOD ID (e.g. MOD:00046)')
    query.add_argument('--pdbcc', help='PDB Chemical Component ID (e.g. SEP)')
    query.add_argument('--list', action='store_true', help='List all modifications')
    parser.add_argument(
        '--catalog', default=None,
        help='Additional catalog XML to register on top of the bundled one'
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Enable debug logging'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    registry = build_registry(args.catalog)

    if args.list:
        print(format_table(registry.get_all()))
        return 0

    if args.pdbcc is not None:
        mods = registry.get_by_pdbcc_id(args.pdbcc)
    elif args.id is not None:
        mods = [registry.get_by_id(args.id)]
    elif args.resid is not None:
        mods = [registry.get_by_resid_id(args.resid)]
    else:
        mods = [registry.get_by_psimod_id(args.psimod)]
    mods = [m for m in mods if m is not None]

    if not mods:
        logger.warning("No matching modification found")
        return 1

    print("\n\n".join(format_modification(m) for m in sorted(mods, key=lambda m: m.id)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
