"""Core data types for progressive unlocks."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Protocol

AbilityId = Hashable


class Rarity(Enum):
    """Rarity tier of an unlockable ability.

    Drives both the selection weight of the weighted draw and the length
    of the generated secret code.
    """

    MANDATORY = "mandatory"
    COMMON = "common"
    RARE = "rare"
    LEGENDARY = "legendary"

    @property
    def weight(self) -> int:
        """Weight in the rarity-weighted draw. Mandatory is never drawn."""
        return _WEIGHTS[self]

    @property
    def code_length(self) -> int:
        """Number of characters in a secret code of this rarity."""
        return _CODE_LENGTHS[self]


_WEIGHTS: dict[Rarity, int] = {
    Rarity.MANDATORY: 0,
    Rarity.COMMON: 10,
    Rarity.RARE: 5,
    Rarity.LEGENDARY: 2,
}

_CODE_LENGTHS: dict[Rarity, int] = {
    Rarity.MANDATORY: 4,
    Rarity.COMMON: 4,
    Rarity.RARE: 6,
    Rarity.LEGENDARY: 8,
}


@dataclass(frozen=True)
class AbilityTemplate:
    """Authored description of an ability, before its code is generated.

    Attributes:
        id: Unique identifier of the ability.
        rarity: Rarity tier.
        dependencies: Ids that must be activated before this one is offered.
        asset_ref: Opaque display reference (icon path) for the host.
    """

    id: AbilityId
    rarity: Rarity
    dependencies: frozenset[AbilityId] = field(default_factory=frozenset)
    asset_ref: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable of ids from callers.
        object.__setattr__(self, "dependencies", frozenset(self.dependencies))


@dataclass(frozen=True)
class AbilityDef:
    """Immutable catalog entry. Not serialized."""

    id: AbilityId
    rarity: Rarity
    secret_code: str
    dependencies: frozenset[AbilityId] = field(default_factory=frozenset)
    asset_ref: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", frozenset(self.dependencies))
        if not self.secret_code:
            raise ValueError(f"{self.id!r}: secret_code must be non-empty")
        if not (self.secret_code.isascii() and self.secret_code.isalnum()):
            raise ValueError(
                f"{self.id!r}: secret_code must be alphanumeric, "
                f"got {self.secret_code!r}"
            )
        if len(self.secret_code) != self.rarity.code_length:
            raise ValueError(
                f"{self.id!r}: {self.rarity.value} codes have "
                f"{self.rarity.code_length} characters, "
                f"got {len(self.secret_code)}"
            )


class RedemptionStatus(Enum):
    """Outcome kind of a redemption attempt."""

    ACTIVATED = "activated"
    ALREADY_ACTIVATED = "already_activated"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RedemptionResult:
    """Value returned by ``UnlockCatalog.redeem``.

    ``ability`` is None only for NOT_FOUND.
    """

    status: RedemptionStatus
    ability: AbilityId | None = None

    @property
    def activated(self) -> bool:
        return self.status is RedemptionStatus.ACTIVATED

    @property
    def already_activated(self) -> bool:
        return self.status is RedemptionStatus.ALREADY_ACTIVATED

    @property
    def not_found(self) -> bool:
        return self.status is RedemptionStatus.NOT_FOUND

    def message(self) -> str:
        """Player-facing description of the outcome."""
        if self.status is RedemptionStatus.ACTIVATED:
            return f"[{_label(self.ability)}] cheat code successfully activated"
        if self.status is RedemptionStatus.ALREADY_ACTIVATED:
            return f"[{_label(self.ability)}] already activated"
        return "cheat code not recognized by the system"


def _label(ability: Any) -> str:
    if isinstance(ability, Enum):
        return ability.name
    return str(ability)


class FrameContext(Protocol):
    """The part of a host tick context the unlock systems read."""

    tick_number: int
    random: _random.Random


class UnlockError(Exception):
    """Base class for unlock catalog errors."""


class MalformedCatalogError(UnlockError):
    """Raised at construction when the catalog definitions are inconsistent.

    Covers duplicate ids, unknown dependencies, dependency cycles and
    duplicate secret codes.
    """


class NoEligibleCandidateError(UnlockError):
    """Raised by ``next_unlock`` when no ability can be offered."""
