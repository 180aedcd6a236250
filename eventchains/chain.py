"""
EventChain - Orchestrates sequential execution of events through middleware.
"""

import logging
import re
from enum import Enum
from functools import reduce

from .context import CURRENT_EVENT_KEY
from .event import ChainableEvent
from .result import Result

logger = logging.getLogger(__name__)


class FaultTolerance(Enum):
    """How an event chain reacts to a failed event."""

    STRICT = "strict"            # First failure stops the chain
    LENIENT = "lenient"          # Failures are recorded, the chain continues
    BEST_EFFORT = "best_effort"  # All events attempted regardless of failures

    @classmethod
    def _missing_(cls, value):
        # Accept "LENIENT", "bestEffort", "best-effort" and friends from config.
        if isinstance(value, str):
            text = value.strip()
            candidates = {
                text.lower().replace('-', '_'),
                re.sub(r'(?<!^)(?=[A-Z])', '_', text).lower(),
            }
            for member in cls:
                if member.value in candidates:
                    return member
        return None


class EventChain:
    """
    Orchestrates sequential execution of events through a middleware pipeline.

    The chain manages:
    - Sequential event execution
    - Middleware pipeline (LIFO order, applied around each event)
    - Error aggregation based on fault tolerance
    - Clearing the shared context once a run is over

    The pipeline is compiled on first use and cached. Every builder method
    drops the cache so the next ``execute`` recompiles.
    """

    def __init__(self, fault_tolerance=FaultTolerance.STRICT):
        """
        Initialize an EventChain.

        Args:
            fault_tolerance: FaultTolerance member or its string value
                (default: STRICT)
        """
        self._events = []
        self._middleware = []
        self._fault_tolerance = FaultTolerance(fault_tolerance)
        self._pipeline = None

    def add_event(self, event):
        """
        Add an event to the end of the chain.

        Args:
            event: ChainableEvent instance to add

        Returns:
            self (for method chaining)
        """
        _require_execute(event, 'event')
        self._events.append(event)
        self._pipeline = None
        return self

    def use_middleware(self, middleware):
        """
        Add middleware to the chain.
        Middleware executes in LIFO order (reverse of registration).

        Args:
            middleware: Middleware instance to add

        Returns:
            self (for method chaining)
        """
        _require_execute(middleware, 'middleware')
        self._middleware.append(middleware)
        self._pipeline = None
        return self

    def set_fault_tolerance(self, fault_tolerance):
        """
        Change how failures are handled.

        Args:
            fault_tolerance: FaultTolerance member or its string value

        Returns:
            self (for method chaining)
        """
        self._fault_tolerance = FaultTolerance(fault_tolerance)
        self._pipeline = None
        return self

    @property
    def fault_tolerance(self):
        return self._fault_tolerance

    def compile(self):
        """
        Return the compiled pipeline, building it if the cache is empty.

        The returned callable takes an EventContext and returns a Result. It
        does not clear the context; ``execute`` does that.
        """
        if self._pipeline is None:
            self._pipeline = self._build_pipeline()
        return self._pipeline

    def execute(self, context):
        """
        Execute all events in the chain through the middleware pipeline.

        The context is cleared before this method returns, including the
        data the caller put in it.

        Args:
            context: EventContext containing shared state

        Returns:
            Result indicating overall success or failure
        """
        try:
            pipeline = self.compile()
            if not callable(pipeline):
                return Result.fail("Failed to build execution pipeline")
            return pipeline(context)
        finally:
            context.clear()

    def _build_pipeline(self):
        """
        Compose every event with the middleware stack.

        Snapshots of the event list, middleware list and policy are taken
        here, so the returned function never looks back at the chain.

        Returns:
            Function running the whole chain against a context
        """
        middleware = tuple(self._middleware)
        fault_tolerance = self._fault_tolerance
        stages = tuple(
            (_event_name(event), _wrap_event(event, middleware))
            for event in self._events
        )

        logger.debug("Compiled pipeline: %d events, %d middleware, %s",
                     len(stages), len(middleware), fault_tolerance.value)

        def run_pipeline(context):
            failures = []

            for event_name, executor in stages:
                # Set before entering the middleware so every layer can read it
                context.set(CURRENT_EVENT_KEY, event_name)

                result = executor(context)

                if not result.success:
                    logger.debug("Event %s failed: %s", event_name, result.error)
                    failures.append(result.error or f"Unknown error in {event_name}")

                    if fault_tolerance is FaultTolerance.STRICT:
                        return Result.fail("; ".join(failures))

            if failures:
                return Result.fail("; ".join(failures))

            return Result.ok()

        return run_pipeline

    def clear_events(self):
        """Remove all events from the chain."""
        self._events.clear()
        self._pipeline = None
        return self

    def clear_middleware(self):
        """Remove all middleware from the chain."""
        self._middleware.clear()
        self._pipeline = None
        return self

    def reset(self):
        """Clear both events and middleware."""
        self.clear_events()
        self.clear_middleware()
        return self

    def event_count(self):
        """Return the number of events in the chain."""
        return len(self._events)

    def middleware_count(self):
        """Return the number of middleware in the chain."""
        return len(self._middleware)

    def __repr__(self):
        return (f"EventChain(events={len(self._events)}, "
                f"middleware={len(self._middleware)}, "
                f"fault_tolerance={self._fault_tolerance.value})")


def _wrap_event(event, middleware):
    """
    Fold the middleware around one event.

    Each layer wraps the ones registered before it, so the first middleware
    ends up closest to the event and the last one outermost.

    Returns:
        Function taking a context and returning the event's Result
    """
    return reduce(_wrap, middleware, event.execute)


def _wrap(next_callable, middleware):
    def wrapper(context):
        return middleware.execute(context, next_callable)
    return wrapper


def _event_name(event):
    if isinstance(event, ChainableEvent):
        return event.name
    return type(event).__name__


def _require_execute(obj, kind):
    if not callable(getattr(obj, 'execute', None)):
        raise TypeError(f"{kind} must define an execute() method, got {obj!r}")
