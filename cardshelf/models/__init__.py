from cardshelf.models.card import Card
from cardshelf.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    InvalidGroupingError,
    InvalidSortingError,
    KnownError,
    MetadataLookupError,
    OutcomeType,
)
from cardshelf.models.grouping import (
    ENCOUNTER_GROUPING_TYPES,
    KEY_SEPARATOR,
    LEVEL_0,
    NONE,
    PLAYER_GROUPING_TYPES,
    UPGRADE,
    GroupedCards,
    GroupingResult,
    GroupingType,
    GroupTreeEntry,
)
from cardshelf.models.metadata import Cycle, EncounterSet, Metadata, Pack

__all__ = [
    "ApiResponse",
    "Card",
    "Cycle",
    "ENCOUNTER_GROUPING_TYPES",
    "EncounterSet",
    "FailureDetail",
    "FailureKind",
    "GroupTreeEntry",
    "GroupedCards",
    "GroupingResult",
    "GroupingType",
    "InvalidGroupingError",
    "InvalidSortingError",
    "KEY_SEPARATOR",
    "KnownError",
    "LEVEL_0",
    "Metadata",
    "MetadataLookupError",
    "NONE",
    "OutcomeType",
    "PLAYER_GROUPING_TYPES",
    "Pack",
    "UPGRADE",
]
