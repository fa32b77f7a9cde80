import logging

from httpapi import config
from httpapi.awslambda import LambdaContext, proxy_handler
from httpapi.errors import EncodeFailure
from httpapi.proxy import ProxyPayload, ProxyResponse, serialize_json

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)


@proxy_handler
def handler(payload: ProxyPayload, _: LambdaContext = None) -> ProxyResponse:
    """
    Respond with the request payload
    """

    try:
        body = serialize_json(payload.to_dict())
    except EncodeFailure:
        logger.exception('Exception encoding payload')
        return ProxyResponse().with_status(500).with_text_body('Can not encode as json')

    return ProxyResponse().with_json_body(body)
