import logging
from typing import Dict, List, Callable, Any
import asyncio

logger = logging.getLogger(__name__)


class EventManager:
    """
    In-process event bus.
    Producers (the deadline scan) emit named events; services subscribe
    handlers without the producer knowing about them.
    """
    def __init__(self):
        self._subscribers: Dict[str, List[Callable]] = {}

    def subscribe(self, event_type: str, handler: Callable):
        """Register a handler for an event type. Re-registering the same handler is a no-op."""
        handlers = self._subscribers.setdefault(event_type, [])
        if handler in handlers:
            return
        handlers.append(handler)
        logger.debug(f"🔌 {handler.__name__} subscribed to {event_type}")

    def subscribers(self, event_type: str) -> List[Callable]:
        return list(self._subscribers.get(event_type, []))

    async def emit(self, event_type: str, payload: Any) -> int:
        """Dispatch an event to every subscriber. Returns the number of handlers run."""
        handlers = self._subscribers.get(event_type)
        if not handlers:
            logger.debug(f"Event {event_type} emitted but no subscribers found.")
            return 0

        logger.info(f"📢 Emitting event: {event_type}")

        tasks = []
        loop = asyncio.get_running_loop()
        for handler in handlers:
            # Support both async and sync handlers
            if asyncio.iscoroutinefunction(handler):
                tasks.append(handler(payload))
            else:
                # Sync handlers run in the default executor so they never block the loop
                tasks.append(loop.run_in_executor(None, handler, payload))

        results = await asyncio.gather(*tasks, return_exceptions=True)
        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                logger.error(f"❌ Handler {handler.__name__} failed on {event_type}: {result}")
        return len(tasks)


# Global Instance
event_bus = EventManager()
