"""
Registry demo: look up bundled modifications and register a custom one.
"""
from protmod import (
    ModificationCategory,
    ModificationOccurrenceType,
    ModificationRegistry,
)


def main() -> None:
    registry = ModificationRegistry()

    print("--- Bundled catalog ---")
    print(f"Modifications: {len(registry)}")
    print(f"RESID IDs: {sorted(registry.get_all_resid_ids())}")

    phospho = registry.get_by_psimod_id("MOD:00046")
    print(f"MOD:00046 -> {phospho.id} {phospho.resid_name} ({phospho.pdbcc_id})")

    print("\n--- Shared chemical component ---")
    for mod in sorted(registry.get_by_pdbcc_id("NAG"), key=lambda m: m.id):
        print(f"NAG: {mod.id} {mod.resid_name}")

    print("\n--- Custom registration ---")
    mod = registry.register(
        "9001", ModificationCategory.CHEMICAL_MODIFICATION, ModificationOccurrenceType.HYPOTHETICAL
    ).pdbcc_id("SEP") \
        .psimod_name("custom phosphoserine variant") \
        .as_modification()
    print(f"Registered {mod!r}")
    print(f"SEP now maps to {sorted(m.id for m in registry.get_by_pdbcc_id('SEP'))}")


if __name__ == "__main__":
    main()
