"""
Store base class

A Store executes one family of Actions against the network and local
storage. Work runs as a task on the running asyncio loop; the action's
callback is invoked exactly once when it finishes.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Set

from sqlalchemy.exc import SQLAlchemyError

from storefront.actions.base import Action
from storefront.connectors.network import Network
from storefront.core.database import StorageManager
from storefront.core.exceptions import StorageError, StorefrontError
from storefront.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class Store:
    """
    Base Store

    Subclasses implement register_supported_actions() and on_action().
    """

    def __init__(self, dispatcher: Dispatcher, storage: StorageManager, network: Network):
        self.dispatcher = dispatcher
        self.storage = storage
        self.network = network
        self._tasks: Set[asyncio.Task] = set()
        self.register_supported_actions(dispatcher)

    def register_supported_actions(self, dispatcher: Dispatcher) -> None:
        raise NotImplementedError

    def on_action(self, action: Action) -> Optional[asyncio.Task]:
        raise NotImplementedError

    def _schedule(self, action: Action, fetch: Callable[[], Awaitable[Any]],
                  persist: Optional[Callable[[Any], Any]] = None) -> Optional[asyncio.Task]:
        """
        Run the action as a task on the current loop

        Outside a running loop nothing is scheduled: the callback receives a
        StorefrontError and None is returned.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.error(f"{type(action).__name__} dispatched outside a running event loop")
            self._complete(action, None, StorefrontError("Actions must be dispatched from a running event loop"))
            return None

        task = loop.create_task(self._perform(action, fetch, persist))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _perform(self, action: Action, fetch: Callable[[], Awaitable[Any]],
                       persist: Optional[Callable[[Any], Any]] = None) -> None:
        """
        One network attempt, then persist and call back

        Errors go to the callback as (None, error) and nothing is persisted.
        Storage calls run in a worker thread so they don't block the loop.
        """
        try:
            result = await fetch()
        except StorefrontError as e:
            logger.error(f"{type(action).__name__} failed: {e}")
            self._complete(action, None, e)
            return

        if persist is not None:
            try:
                await asyncio.to_thread(persist, result)
            except SQLAlchemyError as e:
                logger.error(f"{type(action).__name__}: could not persist result: {e}")
                self._complete(action, None, StorageError(str(e)))
                return

        self._complete(action, result, None)

    @staticmethod
    def _complete(action: Action, result: Any, error: Optional[Exception]) -> None:
        try:
            action.on_completion(result, error)
        except Exception:
            logger.exception(f"Completion callback of {type(action).__name__} raised")

    def _ignore(self, action: Action) -> None:
        logger.warning(f"{type(self).__name__} can't handle {type(action).__name__}")
