"""Event database exceptions."""


class EventListError(Exception):
    """Base class for event list errors."""


class EventTypeError(EventListError):
    """Unknown or conflicting event type definition."""


class EventOrderError(EventListError):
    """Event appended out of time order."""
