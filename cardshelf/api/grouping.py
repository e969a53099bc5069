"""
Grouping API endpoints.

Groups a posted card list into labelled sections. Cards and metadata are
sent with the request; nothing is stored.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from cardshelf.config import settings
from cardshelf.grouping import (
    GROUPING_DOMAINS,
    CardKind,
    get_group_label,
    get_grouped_cards,
    parse_groupings,
)
from cardshelf.models.failure import InvalidSortingError
from cardshelf.services.card_data import cards_from_list, metadata_from_dict
from cardshelf.services.collation import make_collator
from cardshelf.services.i18n import get_translator
from cardshelf.services.sorting import SORTING_TYPES, make_sort_function

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grouping", tags=["grouping"])


class CardPayload(BaseModel):
    """A card as sent by the client."""

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


class PackPayload(BaseModel):
    code: str
    name: str
    cycle_code: str
    position: int = 0
    reprint: bool = False


class CyclePayload(BaseModel):
    code: str
    name: str
    position: int = 0


class EncounterSetPayload(BaseModel):
    code: str
    name: str


class MetadataPayload(BaseModel):
    packs: list[PackPayload] = Field(default_factory=list)
    cycles: list[CyclePayload] = Field(default_factory=list)
    encounter_sets: list[EncounterSetPayload] = Field(default_factory=list)


class GroupingRequest(BaseModel):
    """Request model for grouping cards."""

    groupings: list[str] = Field(default_factory=list)
    card_kind: CardKind | None = None
    cards: list[CardPayload] = Field(default_factory=list)
    metadata: MetadataPayload = Field(default_factory=MetadataPayload)
    sorting: list[str] | None = None
    locale: str | None = None


class GroupResponse(BaseModel):
    """A leaf group."""

    key: str
    type: str
    label: str
    cards: list[str]


class GroupEntryResponse(BaseModel):
    """A group at any depth of the hierarchy."""

    key: str
    type: str
    label: str
    count: int
    parent: str | None = None


class GroupingResponse(BaseModel):
    """Response model for grouped cards."""

    data: list[GroupResponse]
    hierarchy: dict[str, GroupEntryResponse]
    total_cards: int


class GroupingTypesResponse(BaseModel):
    """Groupings offered per kind of card list."""

    domains: dict[str, list[str]]
    sorting: list[str]


@router.get("/types", response_model=GroupingTypesResponse)
async def get_grouping_types() -> GroupingTypesResponse:
    """List the groupings and card sorts the service understands."""
    return GroupingTypesResponse(
        domains={kind: [g.value for g in types] for kind, types in GROUPING_DOMAINS.items()},
        sorting=SORTING_TYPES,
    )


@router.post("", response_model=GroupingResponse)
async def group_cards(request: GroupingRequest) -> GroupingResponse:
    """
    Group cards along the requested dimensions.

    Leaf groups come back in display order with their card codes; the
    hierarchy holds every group at every depth for collapsible sections.
    Unknown groupings or sorting and cards referencing missing packs or cycles
    are reported as known failures.
    """
    groupings = parse_groupings(request.groupings, request.card_kind)

    sorting = request.sorting if request.sorting is not None else settings.default_sorting
    invalid = [s for s in sorting if s not in SORTING_TYPES]
    if invalid:
        raise InvalidSortingError(invalid, SORTING_TYPES)

    locale = request.locale or settings.default_locale
    metadata = metadata_from_dict(request.metadata.model_dump())
    cards = cards_from_list([card.model_dump() for card in request.cards])
    collator = make_collator(locale)
    translate = get_translator(locale)

    grouped = get_grouped_cards(
        groupings,
        cards,
        make_sort_function(sorting, metadata, collator),
        metadata,
        collator,
    )

    logger.info(
        "Grouped %d cards by %s into %d groups",
        len(cards),
        [g.value for g in groupings],
        len(grouped.data),
    )

    def label(key: str, type: str) -> str:
        return get_group_label(key, type, metadata, translate)

    hierarchy = {
        key: GroupEntryResponse(
            key=entry.key,
            type=entry.type,
            label=label(entry.key, entry.type),
            count=entry.count,
            parent=entry.parent,
        )
        for key, entry in grouped.hierarchy.items()
    }

    return GroupingResponse(
        data=[
            GroupResponse(
                key=group.key,
                type=group.type,
                label=label(group.key, group.type),
                cards=[card.code for card in group.cards],
            )
            for group in grouped.data
        ],
        hierarchy=hierarchy,
        total_cards=grouped.total_cards(),
    )
