"""UnlockCatalog — ability catalog with activation state."""
from __future__ import annotations

import random as _random_mod
from typing import Iterable

from tick_unlock.codes import generate_unique_code
from tick_unlock.types import (
    AbilityDef,
    AbilityId,
    AbilityTemplate,
    MalformedCatalogError,
    NoEligibleCandidateError,
    Rarity,
    RedemptionResult,
    RedemptionStatus,
)

_EXHAUSTED = object()


class UnlockCatalog:
    """Fixed set of unlockable abilities plus the set already activated.

    Definitions are immutable after construction; the activation state
    starts empty and only grows, through ``redeem``.

    Not thread-safe. ``redeem`` reads then writes the activation state, so
    a host that shares one catalog between threads must guard every call
    with a single lock.
    """

    def __init__(
        self,
        definitions: Iterable[AbilityDef],
        rng: _random_mod.Random | None = None,
    ) -> None:
        self._definitions: dict[AbilityId, AbilityDef] = {}
        self._by_code: dict[str, AbilityId] = {}
        for defn in definitions:
            if defn.id in self._definitions:
                raise MalformedCatalogError(f"Duplicate ability {defn.id!r}")
            owner = self._by_code.get(defn.secret_code)
            if owner is not None:
                raise MalformedCatalogError(
                    f"{defn.id!r} reuses the secret code of {owner!r}"
                )
            self._definitions[defn.id] = defn
            self._by_code[defn.secret_code] = defn.id
        self._check_dependencies()
        self._activated: list[AbilityId] = []
        self._activated_set: set[AbilityId] = set()
        self._rng = rng if rng is not None else _random_mod.Random()

    @classmethod
    def from_templates(
        cls,
        templates: Iterable[AbilityTemplate],
        rng: _random_mod.Random | None = None,
    ) -> UnlockCatalog:
        """Build a catalog, generating one secret code per template.

        Codes are drawn from *rng* and redrawn on collision, so every
        ability gets a distinct code. The same *rng* then drives
        ``next_unlock``.
        """
        if rng is None:
            rng = _random_mod.Random()
        taken: set[str] = set()
        definitions: list[AbilityDef] = []
        for tpl in templates:
            code = generate_unique_code(tpl.rarity, rng, taken)
            taken.add(code)
            definitions.append(
                AbilityDef(
                    id=tpl.id,
                    rarity=tpl.rarity,
                    secret_code=code,
                    dependencies=tpl.dependencies,
                    asset_ref=tpl.asset_ref,
                )
            )
        return cls(definitions, rng=rng)

    # --- Definitions ---

    def definition(self, ability: AbilityId) -> AbilityDef | None:
        """Look up an ability definition. Returns None if not defined."""
        return self._definitions.get(ability)

    def get(self, ability: AbilityId) -> AbilityDef:
        """Look up an ability definition. Raises KeyError if not defined."""
        if ability not in self._definitions:
            raise KeyError(ability)
        return self._definitions[ability]

    def has(self, ability: AbilityId) -> bool:
        return ability in self._definitions

    def defined_abilities(self) -> list[AbilityId]:
        """All ability ids in definition order."""
        return list(self._definitions)

    def lookup(self, text: str) -> AbilityId | None:
        """Ability whose secret code is exactly *text*, or None."""
        return self._by_code.get(text)

    def __len__(self) -> int:
        return len(self._definitions)

    # --- Activation state ---

    def is_activated(self, ability: AbilityId) -> bool:
        return ability in self._activated_set

    def activated(self) -> list[AbilityId]:
        """Activated ids in activation order."""
        return list(self._activated)

    def remaining(self) -> list[AbilityId]:
        """Ids not yet activated, in definition order."""
        return [a for a in self._definitions if a not in self._activated_set]

    def eligible(self) -> list[AbilityId]:
        """Locked ids whose dependencies are all activated."""
        return [
            a
            for a, defn in self._definitions.items()
            if a not in self._activated_set
            and defn.dependencies <= self._activated_set
        ]

    def is_exhausted(self) -> bool:
        """True once every ability has been activated."""
        return len(self._activated_set) == len(self._definitions)

    # --- Operations ---

    def next_unlock(self, rng: _random_mod.Random | None = None) -> AbilityId:
        """Pick the ability to offer next. Does not activate it.

        Locked mandatory abilities come first, chosen uniformly. Otherwise
        the pick is a draw over the eligible set weighted by rarity.
        Raises NoEligibleCandidateError if nothing can be offered.
        """
        if rng is None:
            rng = self._rng

        mandatory = [
            a
            for a, defn in self._definitions.items()
            if defn.rarity is Rarity.MANDATORY and a not in self._activated_set
        ]
        if mandatory:
            return rng.choice(mandatory)

        candidates = [
            a for a in self.eligible() if self._definitions[a].rarity.weight > 0
        ]
        if not candidates:
            raise NoEligibleCandidateError(
                f"No ability left to offer "
                f"({len(self._activated_set)}/{len(self._definitions)} activated)"
            )
        weights = [self._definitions[a].rarity.weight for a in candidates]
        return rng.choices(candidates, weights=weights, k=1)[0]

    def redeem(self, text: str) -> RedemptionResult:
        """Try to activate the ability whose secret code is *text*.

        Matching is exact and case-sensitive. Only an ACTIVATED result
        changes state.
        """
        ability = self._by_code.get(text)
        if ability is None:
            return RedemptionResult(RedemptionStatus.NOT_FOUND)
        if ability in self._activated_set:
            return RedemptionResult(RedemptionStatus.ALREADY_ACTIVATED, ability)
        self._activated.append(ability)
        self._activated_set.add(ability)
        return RedemptionResult(RedemptionStatus.ACTIVATED, ability)

    # --- Internal helpers ---

    def _check_dependencies(self) -> None:
        """Reject unknown dependency ids and dependency cycles."""
        for ability, defn in self._definitions.items():
            for dep in defn.dependencies:
                if dep not in self._definitions:
                    raise MalformedCatalogError(
                        f"{ability!r} depends on undefined ability {dep!r}"
                    )

        # Iterative DFS; a node seen again while still on the path closes a cycle.
        done: set[AbilityId] = set()
        for root in self._definitions:
            if root in done:
                continue
            path: list[AbilityId] = [root]
            on_path: set[AbilityId] = {root}
            stack = [iter(self._definitions[root].dependencies)]
            while stack:
                dep = next(stack[-1], _EXHAUSTED)
                if dep is _EXHAUSTED:
                    stack.pop()
                    finished = path.pop()
                    on_path.discard(finished)
                    done.add(finished)
                    continue
                if dep in on_path:
                    cycle = path[path.index(dep):] + [dep]
                    raise MalformedCatalogError(
                        "Dependency cycle: " + " -> ".join(repr(a) for a in cycle)
                    )
                if dep in done:
                    continue
                path.append(dep)
                on_path.add(dep)
                stack.append(iter(self._definitions[dep].dependencies))
