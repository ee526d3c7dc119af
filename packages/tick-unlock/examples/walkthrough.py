"""Seeded unlock session -- offer, type back, repeat.

Demonstrates:
- Building the stock catalog from a seed
- Offering the next unlock every few ticks with make_offer_system
- Feeding typed codes back through a RedemptionInbox
- Mandatory-first ordering and dependency gating

Run: python packages/tick-unlock/examples/walkthrough.py
"""

from dataclasses import dataclass
from random import Random

from tick_unlock import (
    AbilityDef,
    RedemptionInbox,
    RedemptionResult,
    build_default_catalog,
    make_offer_system,
    make_redemption_system,
)

OFFER_EVERY = 5


@dataclass
class Frame:
    tick_number: int
    random: Random


def main(seed: int = 42) -> None:
    print(f"=== Unlock walkthrough (seed={seed}) ===\n")

    catalog = build_default_catalog(Random(seed))
    inbox = RedemptionInbox()
    done = [False]

    def on_offer(world: None, ctx: Frame, defn: AbilityDef) -> None:
        print(
            f"  tick {ctx.tick_number:3d}: offer {defn.id.name:<24} "
            f"[{defn.rarity.value:<9}] code={defn.secret_code} ({defn.asset_ref})"
        )
        # A typo on legendary codes, then the right one.
        if len(defn.secret_code) == 8:
            inbox.submit(defn.secret_code.swapcase())
        inbox.submit(defn.secret_code)

    def on_result(world: None, ctx: Frame, text: str, result: RedemptionResult) -> None:
        print(f"  tick {ctx.tick_number:3d}: {text!r} -> {result.message()}")

    def on_exhausted(world: None, ctx: Frame) -> None:
        print(f"  tick {ctx.tick_number:3d}: every cheat code unlocked")
        done[0] = True

    systems = [
        make_redemption_system(
            catalog,
            inbox,
            on_activated=on_result,
            on_already_activated=on_result,
            on_not_found=on_result,
        ),
        make_offer_system(
            catalog,
            should_offer=lambda w, c: c.tick_number % OFFER_EVERY == 0,
            on_offer=on_offer,
            on_exhausted=on_exhausted,
        ),
    ]

    rng = Random(seed)
    tick = 0
    while not done[0]:
        tick += 1
        frame = Frame(tick_number=tick, random=rng)
        for system in systems:
            system(None, frame)

    print()
    print("  Unlock order:")
    for i, ability in enumerate(catalog.activated(), start=1):
        print(f"    {i:2d}. {ability.name}")


if __name__ == "__main__":
    main()
