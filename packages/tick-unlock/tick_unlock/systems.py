"""System factories for progressive unlocks."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from tick_unlock.catalog import UnlockCatalog
from tick_unlock.inbox import RedemptionInbox

if TYPE_CHECKING:
    from tick_unlock.types import AbilityDef, FrameContext, RedemptionResult

RedemptionCallback = Callable[[Any, "FrameContext", str, "RedemptionResult"], None]


def make_redemption_system(
    catalog: UnlockCatalog,
    inbox: RedemptionInbox,
    on_activated: RedemptionCallback | None = None,
    on_already_activated: RedemptionCallback | None = None,
    on_not_found: RedemptionCallback | None = None,
) -> Callable[[Any, FrameContext], None]:
    """Return a system that redeems every queued code each tick.

    Each callback receives ``(world, ctx, text, result)`` and fires once
    per drained string, in submission order.
    """

    def redemption_system(world: Any, ctx: FrameContext) -> None:
        for text, result in inbox.drain(catalog):
            if result.activated:
                callback = on_activated
            elif result.already_activated:
                callback = on_already_activated
            else:
                callback = on_not_found
            if callback is not None:
                callback(world, ctx, text, result)

    return redemption_system


def make_offer_system(
    catalog: UnlockCatalog,
    should_offer: Callable[[Any, FrameContext], bool],
    on_offer: Callable[[Any, FrameContext, AbilityDef], None],
    on_exhausted: Callable[[Any, FrameContext], None] | None = None,
) -> Callable[[Any, FrameContext], None]:
    """Return a system that offers the next unlock when the host asks.

    ``should_offer(world, ctx)`` is the host's decision that the player
    earned a code this tick. The pick uses ``ctx.random`` so a seeded host
    replays the same offers. Once every ability is activated the system
    calls ``on_exhausted(world, ctx)`` instead of drawing.
    """

    def offer_system(world: Any, ctx: FrameContext) -> None:
        if not should_offer(world, ctx):
            return
        if catalog.is_exhausted():
            if on_exhausted is not None:
                on_exhausted(world, ctx)
            return
        ability = catalog.next_unlock(ctx.random)
        on_offer(world, ctx, catalog.get(ability))

    return offer_system
