"""Exception types shared across the application."""


class FetchFailedError(Exception):
    """A pool balance could not be fetched or understood.

    Covers transport errors, timeouts, non-2xx responses, bodies that are not
    JSON and bodies that do not carry the expected balance field.
    """

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the error.

        Args:
            url: URL that was requested.
            reason: Short description of what went wrong.
        """
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class ConfigInvalidError(ValueError):
    """The persisted or provided pool configuration cannot be used."""


__all__ = ["ConfigInvalidError", "FetchFailedError"]
