"""
Read-only metadata index for packs, cycles and encounter sets.

The engine relies on every card's pack resolving to a pack whose cycle
resolves to a cycle. Lookups that break this contract raise
MetadataLookupError instead of returning None.
"""

from dataclasses import dataclass, field

from cardshelf.models.failure import MetadataLookupError


@dataclass(frozen=True, slots=True)
class Cycle:
    code: str
    name: str
    position: int


@dataclass(frozen=True, slots=True)
class Pack:
    """
    A pack within a cycle.

    `reprint` marks packs that re-release the player or encounter cards of
    their cycle (codes like "dwlp" / "dwlc").
    """

    code: str
    name: str
    cycle_code: str
    position: int
    reprint: bool = False


@dataclass(frozen=True, slots=True)
class EncounterSet:
    code: str
    name: str


@dataclass
class Metadata:
    """Lookup tables keyed by code."""

    packs: dict[str, Pack] = field(default_factory=dict)
    cycles: dict[str, Cycle] = field(default_factory=dict)
    encounter_sets: dict[str, EncounterSet] = field(default_factory=dict)

    def get_pack(self, code: str) -> Pack:
        """Get a pack by code. Raises MetadataLookupError if missing."""
        pack = self.packs.get(code)
        if pack is None:
            raise MetadataLookupError("pack", code)
        return pack

    def get_cycle(self, code: str) -> Cycle:
        """Get a cycle by code. Raises MetadataLookupError if missing."""
        cycle = self.cycles.get(code)
        if cycle is None:
            raise MetadataLookupError("cycle", code)
        return cycle

    def get_pack_cycle(self, pack_code: str) -> Cycle:
        """Resolve the cycle a pack belongs to."""
        return self.get_cycle(self.get_pack(pack_code).cycle_code)
