"""Tests for the blocking bridge."""
import threading

import pytest

from aiogpsoauth.core.utils import run_sync


async def current_thread_name():
    return threading.current_thread().name


async def fail():
    raise KeyError("boom")


class TestRunSync:
    """Test suite for run_sync."""

    def test_runs_on_calling_thread_without_loop(self):
        """Test the coroutine runs on the caller's thread."""
        assert run_sync(current_thread_name) == threading.current_thread().name

    def test_exceptions_propagate(self):
        """Test errors are raised unchanged."""
        with pytest.raises(KeyError):
            run_sync(fail)

    @pytest.mark.asyncio
    async def test_inside_running_loop_uses_worker_thread(self):
        """Test a running loop is not re-entered."""
        assert run_sync(current_thread_name) != threading.current_thread().name
