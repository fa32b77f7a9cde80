from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httpapi.proxy import ProxyResponse


class DecodeError(ValueError):
    """
    The invocation event could not be decoded

    Raised for invalid UTF-8, invalid JSON, or an event that does not match the payload format 2.0 schema.
    This is never recovered from - it is surfaced to the runtime.
    """


class EncodeFailure(Exception):
    """
    A response body could not be produced

    Callers are expected to catch this and return a fallback response instead.
    """


class ResponseError(Exception):
    """
    Short-circuit a proxy handler with a prepared response
    """

    def __init__(self, response: 'ProxyResponse'):
        super().__init__(f'HTTP {response.statusCode} Response')
        self.response = response
