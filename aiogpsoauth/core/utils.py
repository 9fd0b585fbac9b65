"""Bridge from blocking callers to the async client."""
import asyncio
import concurrent.futures
from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar('T')


def run_sync(factory: Callable[[], Coroutine[Any, Any, T]]) -> T:
    """
    Run a coroutine to completion from synchronous code.

    Without a running event loop the coroutine runs on the calling thread
    via ``asyncio.run``. Inside a running loop (e.g. a notebook) it runs on
    a one-off worker thread with its own loop, since the caller's loop
    cannot be re-entered.

    Args:
        factory: Zero-argument callable returning the coroutine to run

    Returns:
        The coroutine's result; its exceptions propagate unchanged
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(factory())

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(lambda: asyncio.run(factory()))
        return future.result()
