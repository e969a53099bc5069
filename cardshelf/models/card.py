from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single card from the catalog.

    Attributes:
        code: Unique card code (e.g., "01016")
        name: Card name
        type_code: Card type (e.g., "asset", "event", "treachery")
        pack_code: Code of the pack the card was printed in
        faction_code: Primary faction (e.g., "guardian", "mythos")
        faction2_code: Secondary faction, set for multiclass cards
        subtype_code: "weakness" / "basicweakness" or None
        xp: Experience level, None for cards without a level
        cost: Resource cost, None for cards without a cost, -2 for X costs
        encounter_code: Encounter set code, None for player cards
        permanent: Whether the card is a permanent
        real_slot: Slot designation (e.g., "Hand", "Hand. Arcane")
        position: Position within the pack
    """

    code: str
    name: str
    type_code: str
    pack_code: str
    faction_code: str = "neutral"
    faction2_code: str | None = None
    subtype_code: str | None = None
    xp: int | None = None
    cost: int | None = None
    encounter_code: str | None = None
    permanent: bool = False
    real_slot: str | None = None
    position: int = 0

    @property
    def is_encounter(self) -> bool:
        """Encounter cards carry a non-empty encounter set code."""
        return bool(self.encounter_code)
