import logging
from typing import Optional

import wrapt

from httpapi.codec import decode_authorizer_payload, decode_proxy_payload
from httpapi.errors import EncodeFailure, ResponseError
from httpapi.proxy import ProxyResponse

logger = logging.getLogger(__name__)


class LambdaContext:
    """
    The subset of the Lambda runtime context object these handlers use

    The runtime passes its own context object, this class is for annotations and for invoking handlers locally.
    """

    def __init__(self, aws_request_id: str = 'local', function_name: str = 'local', remaining_time_in_millis: int = 30 * 1000):
        self.aws_request_id = aws_request_id
        self.function_name = function_name
        self._remaining_time_in_millis = remaining_time_in_millis

    def get_remaining_time_in_millis(self) -> int:
        return self._remaining_time_in_millis


def request_id(context) -> Optional[str]:
    return getattr(context, 'aws_request_id', None)


@wrapt.decorator
def authorizer_handler(wrapped, instance, args, kwargs):
    """
    Make a Lambda authorizer entrypoint from a function of (AuthorizerPayload, LambdaContext) -> AuthorizerResponse

    A DecodeError is not caught, the runtime reports the invocation as failed.
    """

    def _execute(event, context=None, *_args, **_kwargs):
        logger.info('event: %r', event, extra={'request_id': request_id(context)})
        payload = decode_authorizer_payload(event)

        response = wrapped(payload, context, *_args, **_kwargs).api_gateway_response()
        logger.info('response: %r', response, extra={'request_id': request_id(context)})
        return response

    return _execute(*args, **kwargs)


@wrapt.decorator
def proxy_handler(wrapped, instance, args, kwargs):
    """
    Make a Lambda proxy integration entrypoint from a function of (ProxyPayload, LambdaContext) -> ProxyResponse

    The wrapped function may raise ResponseError to return a prepared response,
    or EncodeFailure to return a 500 response describing the failure.
    """

    def _execute(event, context=None, *_args, **_kwargs):
        logger.info('event: %r', event, extra={'request_id': request_id(context)})
        payload = decode_proxy_payload(event)

        try:
            response = wrapped(payload, context, *_args, **_kwargs)
        except ResponseError as error:
            logger.info('Handler raised %s', error)
            response = error.response
        except EncodeFailure as failure:
            logger.exception('Failed to encode response body')
            response = ProxyResponse().with_status(500).with_text_body(str(failure))

        http_response = response.api_gateway_response()
        logger.info('response: %r', http_response, extra={'request_id': request_id(context)})
        return http_response

    return _execute(*args, **kwargs)
