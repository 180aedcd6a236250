"""
Sample events shared by the demo and the benchmark.
"""

import logging

from eventchains import ChainableEvent, Result

logger = logging.getLogger(__name__)


class ValidateInputEvent(ChainableEvent):
    """Fail unless ``input`` is a non-negative integer."""

    def execute(self, context):
        value = context.get('input', expected_type=int)
        if value is None:
            return Result.fail("Missing input value")

        if value < 0:
            return Result.fail("Input must be positive")

        return Result.ok()


class ProcessDataEvent(ChainableEvent):
    """Write ``output = input * 2``."""

    def execute(self, context):
        value = context.get('input', expected_type=int)
        if value is None:
            return Result.fail("Missing input value")

        context.set('output', value * 2)
        return Result.ok()


class SaveResultEvent(ChainableEvent):
    """Pretend to persist ``output`` and flag it as saved."""

    def execute(self, context):
        output = context.get('output', expected_type=int)
        if output is None:
            return Result.fail("Missing output value")

        logger.info("Saving result: %s", output)
        context.set('saved', True)
        return Result.ok()
