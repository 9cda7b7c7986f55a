"""Tests for the optimistic update primitive"""

from unittest.mock import AsyncMock, Mock

import pytest

from wordlist_sync.core.optimistic import OptimisticUpdate
from wordlist_sync.exceptions import RemoteError


def make_update(confirm):
    events = []
    update = OptimisticUpdate(
        description="star w1",
        apply=lambda: events.append("apply"),
        revert=lambda: events.append("revert"),
        confirm=confirm,
    )
    return update, events


class TestOptimisticUpdate:
    """Apply, confirm and compensate"""

    @pytest.mark.asyncio
    async def test_success_keeps_change(self):
        """Test a confirmed change is never reverted"""
        update, events = make_update(AsyncMock(return_value={"ok": True}))

        assert await update.run() == {"ok": True}
        assert events == ["apply"]

    @pytest.mark.asyncio
    async def test_failure_reverts_and_reraises(self):
        """Test a rejected change is compensated and the error surfaces"""
        error = RemoteError("POST", "/starred/w1", "Internal error", 500)
        update, events = make_update(AsyncMock(side_effect=error))

        with pytest.raises(RemoteError) as exc_info:
            await update.run()

        assert exc_info.value is error
        assert events == ["apply", "revert"]

    @pytest.mark.asyncio
    async def test_apply_happens_before_confirmation(self):
        """Test the local change is visible while the request is in flight"""
        seen = []
        update, events = make_update(None)

        async def confirm():
            seen.extend(events)

        update.confirm = confirm
        await update.run()

        assert seen == ["apply"]

    @pytest.mark.asyncio
    async def test_stale_rollback_is_dropped(self):
        """Test nothing is reverted once the state has moved on"""
        update, events = make_update(AsyncMock(side_effect=RuntimeError("boom")))
        is_current = Mock(return_value=False)

        with pytest.raises(RuntimeError):
            await update.run(is_current)

        assert events == ["apply"]
        is_current.assert_called_once()
