# errors.py
from typing import Optional


class ChatError(Exception):
    """Base class for every error raised by the chat relay."""


class ValidationError(ChatError):
    """The conversation payload is not an ordered list of valid turns."""


class GenerationError(ChatError):
    """The upstream generation API rejected or failed the request."""


class ChatBusyError(ChatError):
    """A submission was attempted while another one is still in flight."""


class RelayError(ChatError):
    """Client-side failure talking to the relay endpoint."""


class NetworkError(RelayError):
    pass


class RelayTimeoutError(RelayError):
    pass


class UpstreamError(RelayError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
