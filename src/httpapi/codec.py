"""
Decoding of invocation events and encoding of responses

Events may be given as the raw UTF-8 JSON bytes, as JSON text, or as the dict
the Lambda Python runtime has already parsed.
"""

import json
import logging
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from httpapi.api_gateway_types import AuthorizerEvent, HttpEvent, HttpResponse, SimpleAuthorizerResponse
from httpapi.authorizer import AuthorizerPayload, AuthorizerResponse
from httpapi.errors import DecodeError
from httpapi.proxy import ProxyPayload, ProxyResponse

logger = logging.getLogger(__name__)

Payload = TypeVar('Payload', bound=BaseModel)
RawEvent = Union[bytes, bytearray, str, Dict[str, Any]]


def load_event(raw: RawEvent) -> Dict[str, Any]:
    if isinstance(raw, dict):
        return raw

    if not isinstance(raw, (str, bytes, bytearray)):
        raise DecodeError(f'Invocation event must be a JSON object, not {type(raw).__name__}')

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError('Invocation event is not valid UTF-8') from e

    try:
        event = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DecodeError(f'Invocation event is not valid JSON: {e}') from e

    if not isinstance(event, dict):
        raise DecodeError(f'Invocation event must be a JSON object, not {type(event).__name__}')

    return event


def _decode(model: Type[Payload], raw: RawEvent) -> Payload:
    event = load_event(raw)

    try:
        return model.model_validate(event)
    except ValidationError as e:
        logger.warning('Invalid %s: %s', model.__name__, e)
        raise DecodeError(f'Invalid {model.__name__}: {e.error_count()} validation error(s)') from e


def decode_authorizer_payload(raw: Union[RawEvent, AuthorizerEvent]) -> AuthorizerPayload:
    return _decode(AuthorizerPayload, raw)


def decode_proxy_payload(raw: Union[RawEvent, HttpEvent]) -> ProxyPayload:
    return _decode(ProxyPayload, raw)


def encode_response(response: Union[AuthorizerResponse, ProxyResponse]) -> Union[SimpleAuthorizerResponse, HttpResponse]:
    return response.api_gateway_response()


def encode_response_bytes(response: Union[AuthorizerResponse, ProxyResponse]) -> bytes:
    return json.dumps(encode_response(response), separators=(',', ':')).encode('utf-8')
