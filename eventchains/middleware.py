"""
Middleware - Cross-cutting concerns that wrap event execution.

Besides the ``Middleware`` base class this module ships two ready-made
layers:
- LoggingMiddleware: start/complete/fail lines through ``logging``
- TimingMiddleware: per-event wall-clock timings and a summary report
"""

import logging
import time

from .context import CURRENT_EVENT_KEY


class Middleware:
    """
    Base class for middleware that wraps event execution.

    Middleware executes in LIFO order (reverse of registration) - like gift
    wrapping. The last middleware registered is the outermost layer around
    every event.
    """

    def execute(self, context, next_callable):
        """
        Execute the middleware logic.

        Args:
            context: EventContext containing shared state
            next_callable: Function running the next inner layer. Not calling
                it short-circuits the event.

        Returns:
            Result from the next callable (or a replacement result)

        Example:
            def execute(self, context, next_callable):
                # Before logic
                result = next_callable(context)
                # After logic
                return result
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__


class LoggingMiddleware(Middleware):
    """
    Log the start and outcome of every event.

    Failures are logged at WARNING regardless of ``level``.
    """

    def __init__(self, logger=None, level=logging.INFO):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def execute(self, context, next_callable):
        event_name = context.get(CURRENT_EVENT_KEY, 'Unknown')
        self.logger.log(self.level, "Starting %s", event_name)

        result = next_callable(context)

        if result.success:
            self.logger.log(self.level, "Completed %s", event_name)
        else:
            self.logger.warning("Failed %s: %s", event_name, result.error)

        return result


class TimingMiddleware(Middleware):
    """
    Profile the execution time of each event.

    Tracks, per event name:
    - number of calls
    - min, max, average and total time in milliseconds
    """

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.timings = {}

    def execute(self, context, next_callable):
        event_name = context.get(CURRENT_EVENT_KEY, 'Unknown')

        start = time.perf_counter()
        result = next_callable(context)
        elapsed = (time.perf_counter() - start) * 1000

        self.timings.setdefault(event_name, []).append(elapsed)
        self.logger.debug("%s took %.3fms", event_name, elapsed)

        return result

    def get_report(self):
        """Return one summary dict per event, sorted by event name."""
        report = []

        for event, times in sorted(self.timings.items()):
            total_time = sum(times)
            report.append({
                'event': event,
                'calls': len(times),
                'avg_ms': total_time / len(times),
                'min_ms': min(times),
                'max_ms': max(times),
                'total_ms': total_time,
            })

        return report

    def reset(self):
        """Reset all timing data."""
        self.timings.clear()
