import base64
import binascii
import json
import logging
import mimetypes
from typing import Any, Dict, List, Literal, Optional, cast

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from httpapi.api_gateway_types import HttpEvent, HttpResponse
from httpapi.errors import DecodeError, EncodeFailure
from httpapi.request_context import RequestAccessors, RequestContext

logger = logging.getLogger(__name__)


class ProxyPayload(RequestAccessors, BaseModel):
    """
    A proxy integration invocation event
    """

    model_config = ConfigDict(frozen=True)

    version: Literal['2.0']
    routeKey: StrictStr
    rawPath: StrictStr
    rawQueryString: StrictStr
    cookies: Optional[List[StrictStr]] = None
    headers: Dict[StrictStr, StrictStr]
    queryStringParameters: Optional[Dict[StrictStr, StrictStr]] = None
    requestContext: RequestContext
    body: Optional[StrictStr] = None
    pathParameters: Optional[Dict[StrictStr, StrictStr]] = None
    isBase64Encoded: StrictBool = False
    stageVariables: Optional[Dict[StrictStr, StrictStr]] = None

    @property
    def path(self) -> str:
        return self.requestContext.http.path

    def text_body(self) -> Optional[str]:
        """
        The request body as text

        If the gateway base64 encoded the body it is decoded first, and must then be valid UTF-8.
        """

        if self.body is None:
            return None

        if not self.isBase64Encoded:
            return self.body

        try:
            return self.binary_body().decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError('Request body is not valid UTF-8') from e

    def binary_body(self) -> Optional[bytes]:
        if self.body is None:
            return None

        if not self.isBase64Encoded:
            return self.body.encode('utf-8')

        try:
            return base64.b64decode(self.body, validate=True)
        except binascii.Error as e:
            raise DecodeError('Request body is not valid base64') from e

    def to_dict(self) -> HttpEvent:
        return cast(HttpEvent, self.model_dump(by_alias=True, exclude_none=True))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def serialize_json(obj: Any) -> str:
    """
    Render a value as JSON text, for use with ProxyResponse.with_json_body
    """

    try:
        return json.dumps(obj)
    except (TypeError, ValueError) as e:
        raise EncodeFailure(f'Can not encode {type(obj).__name__} as json') from e


class ProxyResponse(BaseModel):
    """
    An HTTP response to return through the gateway

    Responses are immutable - every with_ method returns a new response, so they can be chained:

        ProxyResponse().with_status(404).with_text_body('Not Found')

    """

    model_config = ConfigDict(frozen=True)

    statusCode: int = 200
    headers: Dict[str, str] = Field(default_factory=dict)
    cookies: List[str] = Field(default_factory=list)
    body: Optional[str] = None
    isBase64Encoded: bool = False

    def __str__(self):
        return f'HTTP {self.statusCode} Response'

    def _replace(self, **update) -> 'ProxyResponse':
        # The copy must not share its headers or cookies with this response
        update.setdefault('headers', dict(self.headers))
        update.setdefault('cookies', list(self.cookies))
        return self.model_copy(update=update)

    def with_status(self, status_code: int) -> 'ProxyResponse':
        return self._replace(statusCode=status_code)

    def with_header(self, name: str, value: str) -> 'ProxyResponse':
        """
        Set a header, replacing any existing header with the same name

        Header names are compared case-insensitively.
        """

        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return self._replace(headers=headers)

    def with_cookie(self, name: str, value: str) -> 'ProxyResponse':
        return self._replace(cookies=self.cookies + [f'{name}={value}'])

    def with_body(self, body: str, is_base64_encoded: bool, content_type: str) -> 'ProxyResponse':
        response = self.with_header('content-type', content_type)
        return response._replace(body=body, isBase64Encoded=is_base64_encoded)

    def with_json_body(self, body: str) -> 'ProxyResponse':
        return self.with_body(body, False, 'application/json')

    def with_text_body(self, body: str) -> 'ProxyResponse':
        return self.with_body(body, False, 'text/plain')

    def with_html_body(self, body: str) -> 'ProxyResponse':
        return self.with_body(body, False, 'text/html; charset=utf-8')

    def with_binary_body(self, body: bytes, content_type: str = 'application/octet-stream') -> 'ProxyResponse':
        return self.with_body(base64.b64encode(body).decode(), True, content_type)

    def with_file_body(self, path: str) -> 'ProxyResponse':
        with open(path, 'rb') as f:
            body = f.read()

        content_type, _ = mimetypes.guess_type(path)
        return self.with_binary_body(body, content_type or 'application/octet-stream')

    def api_gateway_response(self) -> HttpResponse:
        http_response = cast(HttpResponse, self.model_dump(exclude_none=True))

        logger.info(f'Sending {self}')

        return http_response
