"""Exceptions raised by the routing runtime."""


class SkillRouterError(Exception):
    """Base class for skill router errors."""


class UnhandledEventError(SkillRouterError):
    """No pipeline step produced a response for the request."""

    def __init__(self, request_type: str | None = None):
        self.request_type = request_type
        message = "Event unhandled"
        if request_type:
            message = f"Event unhandled: {request_type}"
        super().__init__(message)


class MalformedResponseError(SkillRouterError, ValueError):
    """A handler returned speech with neither text nor SSML."""
