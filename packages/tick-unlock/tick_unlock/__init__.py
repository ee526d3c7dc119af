"""tick-unlock — Progressive cheat-code unlocks for the tick engine."""
from tick_unlock.catalog import UnlockCatalog
from tick_unlock.codes import CODE_ALPHABET, generate_code, generate_unique_code
from tick_unlock.defaults import DEFAULT_TEMPLATES, Ability, build_default_catalog
from tick_unlock.inbox import RedemptionInbox
from tick_unlock.systems import make_offer_system, make_redemption_system
from tick_unlock.types import (
    AbilityDef,
    AbilityTemplate,
    FrameContext,
    MalformedCatalogError,
    NoEligibleCandidateError,
    Rarity,
    RedemptionResult,
    RedemptionStatus,
    UnlockError,
)

__all__ = [
    "Ability",
    "AbilityDef",
    "AbilityTemplate",
    "CODE_ALPHABET",
    "DEFAULT_TEMPLATES",
    "FrameContext",
    "MalformedCatalogError",
    "NoEligibleCandidateError",
    "Rarity",
    "RedemptionInbox",
    "RedemptionResult",
    "RedemptionStatus",
    "UnlockCatalog",
    "UnlockError",
    "build_default_catalog",
    "generate_code",
    "generate_unique_code",
    "make_offer_system",
    "make_redemption_system",
]
