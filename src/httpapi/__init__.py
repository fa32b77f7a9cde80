"""
Payload format 2.0 events and responses for Lambda functions behind an HTTP API
"""

from httpapi.authorizer import AuthorizerPayload, AuthorizerResponse
from httpapi.codec import decode_authorizer_payload, decode_proxy_payload, encode_response, encode_response_bytes
from httpapi.errors import DecodeError, EncodeFailure, ResponseError
from httpapi.proxy import ProxyPayload, ProxyResponse, serialize_json
from httpapi.request_context import RequestContext

__all__ = [
    'AuthorizerPayload',
    'AuthorizerResponse',
    'DecodeError',
    'EncodeFailure',
    'ProxyPayload',
    'ProxyResponse',
    'RequestContext',
    'ResponseError',
    'decode_authorizer_payload',
    'decode_proxy_payload',
    'encode_response',
    'encode_response_bytes',
    'serialize_json',
]

__version__ = '0.1.0'
