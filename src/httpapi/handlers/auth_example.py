import logging

from httpapi import config
from httpapi.authorizer import AuthorizerPayload, AuthorizerResponse
from httpapi.awslambda import LambdaContext, authorizer_handler

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)

routes = {
    '/': AuthorizerResponse.allow(),
    '/pass': AuthorizerResponse.allow(),
    '/pass_with_context': AuthorizerResponse.allow_with_context({'type': 'sudo', 'user_type': 'admin'}),
    '/deny': AuthorizerResponse.deny(),
    '/deny_with_context': AuthorizerResponse.deny_with_context({'type': 'failed', 'user_type': 'visitor'}),
}


@authorizer_handler
def handler(payload: AuthorizerPayload, _: LambdaContext = None) -> AuthorizerResponse:
    logger.info('payload: %s', payload.to_json())
    return routes.get(payload.path, AuthorizerResponse.allow())
