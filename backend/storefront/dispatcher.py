"""
Dispatcher - routes Actions to the Store registered for their family

There is no process-wide instance: build one and inject it into the Stores.
"""
import asyncio
import logging
from typing import Dict, Optional, Protocol, Type

from storefront.actions.base import Action

logger = logging.getLogger(__name__)


class ActionHandler(Protocol):
    def on_action(self, action: Action) -> Optional[asyncio.Task]:
        ...


class Dispatcher:
    """
    Synchronous action router

    Routing walks the action's class hierarchy, so registering a Store for
    OrderAction makes it receive every OrderAction variant.
    """

    def __init__(self, handlers: Optional[Dict[Type[Action], ActionHandler]] = None):
        self._handlers: Dict[Type[Action], ActionHandler] = dict(handlers or {})

    def register(self, store: ActionHandler, action_type: Type[Action]) -> None:
        previous = self._handlers.get(action_type)
        if previous is not None and previous is not store:
            logger.warning(
                f"Replacing {type(previous).__name__} with {type(store).__name__} for {action_type.__name__}"
            )
        self._handlers[action_type] = store

    def unregister(self, action_type: Type[Action]) -> None:
        self._handlers.pop(action_type, None)

    def handler_for(self, action_type: Type[Action]) -> Optional[ActionHandler]:
        for klass in action_type.__mro__:
            handler = self._handlers.get(klass)
            if handler is not None:
                return handler
        return None

    def dispatch(self, action: Action) -> Optional[asyncio.Task]:
        """
        Hand the action to its Store

        Returns:
            The Store's task, or None when no Store handles the action's
            family. In that case nothing happens and the action's callback
            is never invoked.
        """
        handler = self.handler_for(type(action))
        if handler is None:
            logger.warning(f"No store registered for {type(action).__name__}, dropping action")
            return None
        return handler.on_action(action)
