"""
ChainableEvent - Base class for discrete units of business logic in an event chain.
"""


class ChainableEvent:
    """
    Base class for events in an event chain.
    Each event represents a discrete unit of business logic.

    Events should be stateless - all state flows through the EventContext.
    An event must not assume that any particular event ran before it; a
    required key that is missing is reported with ``Result.fail``.
    """

    def execute(self, context):
        """
        Execute the event logic.

        Args:
            context: EventContext containing shared state

        Returns:
            Result indicating success or failure

        Raises:
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")

    @property
    def name(self):
        """Display name used for tracing, derived from the class."""
        return self.__class__.__name__

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.name
