"""Apply locally, confirm remotely, compensate on failure"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class OptimisticUpdate:
    """One optimistic change.

    ``apply`` and ``revert`` are synchronous, so nothing can interleave with
    them; ``confirm`` is the single suspension point.
    """

    description: str
    apply: Callable[[], None]
    revert: Callable[[], None]
    confirm: Callable[[], Awaitable[Any]]

    async def run(self, is_current: Callable[[], bool] = lambda: True) -> Any:
        """Apply, then await confirmation; revert if it fails.

        ``is_current`` is checked before reverting: when it returns False the
        state this change was applied to is gone and the rollback is dropped.
        The confirmation error is re-raised either way.
        """
        self.apply()
        try:
            return await self.confirm()
        except Exception:
            if is_current():
                logger.debug(f"Reverting {self.description}")
                self.revert()
            else:
                logger.debug(f"Dropping stale rollback of {self.description}")
            raise
