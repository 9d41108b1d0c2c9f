"""Exceptions raised by the outlinemd shell (config, API, I/O)."""


class OutlineError(Exception):
    """Base class for errors reported to the user."""


class ConfigError(OutlineError):
    pass


class UnexpectedResponseError(OutlineError):
    pass


class BadRequestError(OutlineError):
    """The API rejected the request with HTTP 400."""

    def __init__(self, data: str = ""):
        self.data = data
        super().__init__(f"Bad request: {data}" if data else "Bad request")
