"""RedemptionInbox — player-entered codes waiting for the next tick."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_unlock.catalog import UnlockCatalog
    from tick_unlock.types import RedemptionResult


class RedemptionInbox:
    """FIFO of raw strings submitted by the host's input layer.

    The host may submit at any time; codes are only redeemed when the
    inbox is drained, normally by the redemption system during a tick.
    """

    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def submit(self, text: str) -> None:
        """Queue a player-entered string. Safe to call between ticks."""
        self._pending.append(text)

    def pending(self) -> int:
        """Return the number of strings waiting to be redeemed."""
        return len(self._pending)

    def drain(self, catalog: UnlockCatalog) -> list[tuple[str, RedemptionResult]]:
        """Redeem every pending string in submission order.

        Returns ``[(text, result), ...]``.
        """
        results: list[tuple[str, RedemptionResult]] = []
        while self._pending:
            text = self._pending.popleft()
            results.append((text, catalog.redeem(text)))
        return results
