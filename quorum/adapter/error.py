"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class LiveChannelError(AdapterError):
    """Live channel delivery error."""

    pass
