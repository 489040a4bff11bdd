"""
Modification Registry

Holds every known ``ProteinModification`` and indexes them by modification
id, RESID ID, PSI-MOD ID and PDBCC ID.

A registry starts empty and fills itself from a modification catalog the
first time it is used (``ensure_loaded``). Catalog entries are registered
through the same ``register``/builder path as programmatic additions, so
both share one set of checks. A catalog that cannot be read or parsed is
logged and skipped; whatever was registered before the failure stays.

Usage:
    from protmod import ModificationRegistry

    registry = ModificationRegistry()
    mod = registry.get_by_resid_id("AA0037")
    phospho = registry.get_by_pdbcc_id("SEP")
"""

from __future__ import annotations

import logging
from importlib import resources
from typing import BinaryIO, Callable, Dict, FrozenSet, Iterator, Optional, Set

from .categories import ModificationCategory, ModificationOccurrenceType
from .constants import CATALOG_DATA_PACKAGE, DEFAULT_CATALOG_RESOURCE
from .errors import InputError, RegistrationError
from .io.catalog import register_catalog
from .modification import ModificationBuilder, ProteinModification

logger = logging.getLogger(__name__)


def open_package_resource(name: str) -> BinaryIO:
    """Open a catalog bundled in ``protmod.data`` as a binary stream."""
    return resources.files(CATALOG_DATA_PACKAGE).joinpath(name).open("rb")


class ModificationRegistry:
    """
    Registry of protein modifications with lookup by four id schemes.

    Args:
        catalog: Name of the catalog resource loaded on first use. ``None``
            starts from an empty registry.
        opener: Callable returning a binary stream for a resource name.
            Defaults to reading from the bundled ``protmod.data`` package.

    Not thread-safe: loading and registration need external locking when
    shared across threads.
    """

    def __init__(
        self,
        catalog: Optional[str] = DEFAULT_CATALOG_RESOURCE,
        opener: Callable[[str], BinaryIO] = open_package_resource,
    ):
        self.catalog = catalog
        self._opener = opener

        # None until ensure_loaded() runs
        self._registry: Optional[Set[ProteinModification]] = None
        self._by_id: Optional[Dict[str, ProteinModification]] = None
        self._by_resid_id: Optional[Dict[str, ProteinModification]] = None
        self._by_psimod_id: Optional[Dict[str, ProteinModification]] = None
        self._by_pdbcc_id: Optional[Dict[str, Set[ProteinModification]]] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._registry is not None

    def ensure_loaded(self) -> "ModificationRegistry":
        """Create the indexes and load the catalog, once."""
        if self._registry is not None:
            return self

        self._registry = set()
        self._by_id = {}
        self._by_resid_id = {}
        self._by_psimod_id = {}
        self._by_pdbcc_id = {}

        if self.catalog is not None:
            self._load_default_catalog()
        return self

    def _load_default_catalog(self) -> None:
        try:
            with self._opener(self.catalog) as stream:
                count = register_catalog(stream, self)
        except Exception:
            logger.warning(
                f"Failed to load modification catalog '{self.catalog}'; "
                f"continuing with {len(self._registry)} modification(s)",
                exc_info=True,
            )
            return
        logger.debug(f"Registered {count} modification(s) from '{self.catalog}'")

    def load_catalog(self, stream: BinaryIO) -> int:
        """
        Register every entry of an additional catalog.

        Unlike the catalog loaded on first use, errors propagate to the
        caller. Entries before the failing one remain registered.

        Returns:
            Number of modifications registered from ``stream``.
        """
        self.ensure_loaded()
        return register_catalog(stream, self)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        mod_id: str,
        category: ModificationCategory,
        occurrence_type: ModificationOccurrenceType,
    ) -> ModificationBuilder:
        """
        Register a new modification and return a builder for its optional
        attributes.

        Args:
            mod_id: Unique modification id.
            category: Modification category.
            occurrence_type: How the modification occurs.

        Raises:
            InputError: If an argument is missing or of the wrong type.
            RegistrationError: If ``mod_id`` is already registered.
        """
        if not isinstance(mod_id, str) or not mod_id:
            raise InputError(f"Modification id must be a non-empty string, got {mod_id!r}")
        if not isinstance(category, ModificationCategory):
            raise InputError(f"category must be a ModificationCategory, got {category!r}")
        if not isinstance(occurrence_type, ModificationOccurrenceType):
            raise InputError(
                f"occurrence_type must be a ModificationOccurrenceType, got {occurrence_type!r}"
            )

        self.ensure_loaded()

        if mod_id in self._by_id:
            raise RegistrationError(f"{mod_id} has already been registered.")

        current = ProteinModification(mod_id, category, occurrence_type)
        self._registry.add(current)
        self._by_id[mod_id] = current
        return ModificationBuilder(self, current)

    def _check_available(self, field: str, value: str) -> None:
        """Raise if ``value`` is already claimed in a one-to-one index."""
        if field == "resid_id" and value in self._by_resid_id:
            raise RegistrationError(f"RESID ID {value} has been registered.")
        if field == "psimod_id" and value in self._by_psimod_id:
            raise RegistrationError(f"PSI-MOD ID {value} has been registered.")

    def _index_field(self, mod: ProteinModification, field: str) -> None:
        """Bring the secondary index for ``field`` in line with ``mod``."""
        if field == "pdbcc_id":
            self._by_pdbcc_id.setdefault(mod.pdbcc_id, set()).add(mod)
        elif field == "resid_id":
            self._by_resid_id[mod.resid_id] = mod
        elif field == "psimod_id":
            self._by_psimod_id[mod.psimod_id] = mod

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_by_id(self, mod_id: str) -> Optional[ProteinModification]:
        self.ensure_loaded()
        return self._by_id.get(mod_id)

    def get_by_resid_id(self, resid_id: str) -> Optional[ProteinModification]:
        self.ensure_loaded()
        return self._by_resid_id.get(resid_id)

    def get_by_psimod_id(self, psimod_id: str) -> Optional[ProteinModification]:
        self.ensure_loaded()
        return self._by_psimod_id.get(psimod_id)

    def get_by_pdbcc_id(self, pdbcc_id: str) -> FrozenSet[ProteinModification]:
        """All modifications sharing a PDBCC ID (empty if none)."""
        self.ensure_loaded()
        return frozenset(self._by_pdbcc_id.get(pdbcc_id, ()))

    def get_all(self) -> FrozenSet[ProteinModification]:
        self.ensure_loaded()
        return frozenset(self._registry)

    def get_all_ids(self) -> FrozenSet[str]:
        self.ensure_loaded()
        return frozenset(self._by_id)

    def get_all_pdbcc_ids(self) -> FrozenSet[str]:
        self.ensure_loaded()
        return frozenset(self._by_pdbcc_id)

    def get_all_resid_ids(self) -> FrozenSet[str]:
        self.ensure_loaded()
        return frozenset(self._by_resid_id)

    def get_all_psimod_ids(self) -> FrozenSet[str]:
        self.ensure_loaded()
        return frozenset(self._by_psimod_id)

    def __len__(self) -> int:
        self.ensure_loaded()
        return len(self._registry)

    def __contains__(self, mod_id: object) -> bool:
        self.ensure_loaded()
        return mod_id in self._by_id

    def __iter__(self) -> Iterator[ProteinModification]:
        self.ensure_loaded()
        return iter(sorted(self._registry, key=lambda m: m.id))

    def __repr__(self) -> str:
        if self._registry is None:
            return f"ModificationRegistry(catalog={self.catalog!r}, loaded=False)"
        return f"ModificationRegistry(catalog={self.catalog!r}, modifications={len(self._registry)})"
