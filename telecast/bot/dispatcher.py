"""Long-polling loop.

Fetches updates with ``getUpdates``, advances the offset past each one and
routes it through :meth:`Bot.handle_update`.  :func:`run_polling` blocks;
:func:`run_polling_async` runs each update's handlers in a worker thread so a
slow handler never blocks the next ``getUpdates`` call.

Updates arrive as raw mappings and are parsed one at a time, so a single
malformed update is logged and skipped (its offset still acknowledged)
instead of poisoning the whole batch.  Handler errors are logged and never
stop the loop.
"""

import asyncio
import time
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

from telecast.bot.controller import Bot
from telecast.core.exceptions import TypeMismatch
from telecast.core.logger import TelecastLogger
from telecast.sdk.client import Failure, TelegramMethod
from telecast.sdk.methods import get_method
from telecast.sdk.models import Update

logger = TelecastLogger.get_logger()

# Seconds to back off after getUpdates fails; also the HTTP slack over the long-poll timeout.
RETRY_DELAY = 5


class _UpdateBatch(TelegramMethod):
    """``getUpdates`` whose result is kept as a list of raw update mappings."""

    def _cast_result(self, raw: Any) -> List[Any]:
        if not isinstance(raw, list):
            raise TypeMismatch("Update[]", raw)
        return raw


def _poll_arguments(offset: Optional[int], timeout: int, allowed_updates: Optional[Sequence[str]]) -> dict:
    args: dict = {"timeout": timeout}
    if offset is not None:
        args["offset"] = offset
    if allowed_updates is not None:
        args["allowed_updates"] = list(allowed_updates)
    return args


def _fetch(bot: Bot, args: dict, timeout: int, run_async: bool) -> Any:
    method = _UpdateBatch(
        bot.token, get_method("getUpdates"), args, api_url=bot.api_url, timeout=timeout + RETRY_DELAY,
    )
    return method.execute(exceptions=False, run_async=run_async)


def _accept(batch: List[Any], offset: Optional[int]) -> Tuple[List[Update], Optional[int]]:
    """Parse a raw batch; return the valid updates and the next offset."""
    updates: List[Update] = []
    for raw in batch:
        update_id = raw.get("update_id") if isinstance(raw, Mapping) else None
        if isinstance(update_id, int):
            offset = update_id + 1
        try:
            updates.append(Update(raw))
        except TypeMismatch as exc:
            logger.warning("Skipping malformed update", extra={"update_id": update_id, "error": str(exc)})
    return updates, offset


def _dispatch(bot: Bot, update: Update) -> None:
    try:
        bot.handle_update(update)
    except Exception:
        logger.exception("Update handler failed", extra={"update_id": update.update_id})


def _log_failure(error: Exception) -> None:
    logger.warning(
        "getUpdates failed, retrying",
        extra={"api_method": "getUpdates", "error": str(error), "retry_in": RETRY_DELAY},
    )


def iter_updates(
    bot: Bot,
    timeout: int = 30,
    allowed_updates: Optional[Sequence[str]] = None,
    offset: Optional[int] = None,
    max_batches: Optional[int] = None,
) -> Iterator[Update]:
    """Yield updates as they arrive, acknowledging each one.

    Failed ``getUpdates`` calls are logged and retried after
    :data:`RETRY_DELAY` seconds, whatever the bot's exception policy.
    *max_batches* bounds the number of ``getUpdates`` calls (unbounded when
    ``None``).
    """
    batches = 0
    while max_batches is None or batches < max_batches:
        batches += 1
        args = _poll_arguments(offset, timeout, allowed_updates)
        try:
            batch = _fetch(bot, args, timeout, run_async=False)
        except TypeMismatch as exc:
            batch = Failure(exc)
        if isinstance(batch, Failure):
            _log_failure(batch.error)
            time.sleep(RETRY_DELAY)
            continue

        updates, offset = _accept(batch, offset)
        if updates:
            logger.debug("Received updates", extra={"count": len(updates)})
        yield from updates


def run_polling(bot: Bot, timeout: int = 30, allowed_updates: Optional[Sequence[str]] = None) -> None:
    """Block forever, dispatching every polled update to the bot's handlers."""
    logger.info("Polling for updates...")
    for update in iter_updates(bot, timeout=timeout, allowed_updates=allowed_updates):
        _dispatch(bot, update)


async def run_polling_async(bot: Bot, timeout: int = 30, allowed_updates: Optional[Sequence[str]] = None) -> None:
    """Async polling loop.

    Each update is spawned as an independent :func:`asyncio.create_task` so
    the loop immediately proceeds to fetch the next batch.
    """
    offset: Optional[int] = None
    tasks: set = set()

    logger.info("Polling for updates (async)...")
    while True:
        args = _poll_arguments(offset, timeout, allowed_updates)
        try:
            batch = await _fetch(bot, args, timeout, run_async=True)
        except TypeMismatch as exc:
            batch = Failure(exc)
        if isinstance(batch, Failure):
            _log_failure(batch.error)
            await asyncio.sleep(RETRY_DELAY)
            continue

        updates, offset = _accept(batch, offset)
        for update in updates:
            task = asyncio.create_task(asyncio.to_thread(_dispatch, bot, update))
            tasks.add(task)
            task.add_done_callback(tasks.discard)
