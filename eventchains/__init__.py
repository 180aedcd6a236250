"""
EventChains - A Universal Design Pattern for Sequential Workflows

EventChains is a design pattern for building sequential workflows with composable middleware.
It provides a structured approach to building workflows where:
- Events represent individual steps in a process
- Context carries shared state between events
- Middleware adds reusable behaviors around each event
- Chain compiles the events and middleware once and runs them in order

Example:
    from eventchains import EventChain, ChainableEvent, EventContext, Result

    class Double(ChainableEvent):
        def execute(self, context):
            value = context.get('input', expected_type=int)
            if value is None:
                return Result.fail("Missing input value")
            context.set('output', value * 2)
            return Result.ok()

    chain = EventChain().add_event(Double())

    result = chain.execute(EventContext({'input': 5}))
    print(result)  # Success

The context is cleared when ``execute`` returns; read results out of it from
an event or a middleware during the run.
"""

import logging

__version__ = "1.1.0"
__author__ = "EventChains Contributors"

from .chain import EventChain, FaultTolerance
from .context import CURRENT_EVENT_KEY, EventContext
from .event import ChainableEvent
from .middleware import LoggingMiddleware, Middleware, TimingMiddleware
from .result import Result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'EventChain',
    'EventContext',
    'ChainableEvent',
    'Middleware',
    'LoggingMiddleware',
    'TimingMiddleware',
    'Result',
    'FaultTolerance',
    'CURRENT_EVENT_KEY',
]
