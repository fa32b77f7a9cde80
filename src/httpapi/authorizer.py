import json
import logging
from typing import Dict, List, Literal, Mapping, Optional, cast

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from httpapi.api_gateway_types import AuthorizerEvent, SimpleAuthorizerResponse
from httpapi.request_context import RequestAccessors, RequestContext

logger = logging.getLogger(__name__)


class AuthorizerPayload(RequestAccessors, BaseModel):
    """
    A Lambda REQUEST authorizer invocation event
    """

    model_config = ConfigDict(frozen=True)

    version: Literal['2.0']
    type: StrictStr
    routeArn: StrictStr
    identitySource: List[StrictStr]
    authorizationToken: Optional[StrictStr] = None
    resource: Optional[StrictStr] = None
    path: StrictStr
    httpMethod: StrictStr
    headers: Dict[StrictStr, StrictStr]
    queryStringParameters: Optional[Dict[StrictStr, StrictStr]] = None
    pathParameters: Optional[Dict[StrictStr, StrictStr]] = None
    stageVariables: Optional[Dict[StrictStr, StrictStr]] = None
    requestContext: RequestContext

    routeKey: Optional[StrictStr] = None
    rawPath: Optional[StrictStr] = None
    rawQueryString: Optional[StrictStr] = None
    cookies: Optional[List[StrictStr]] = None

    def to_dict(self) -> AuthorizerEvent:
        return cast(AuthorizerEvent, self.model_dump(by_alias=True, exclude_none=True))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class AuthorizerResponse(BaseModel):
    """
    A simple authorizer response

    A context of None is omitted from the response entirely,
    which is not the same as an empty context.
    """

    model_config = ConfigDict(frozen=True)

    isAuthorized: StrictBool
    context: Optional[Dict[str, str]] = None

    @classmethod
    def allow(cls) -> 'AuthorizerResponse':
        return cls(isAuthorized=True)

    @classmethod
    def deny(cls) -> 'AuthorizerResponse':
        return cls(isAuthorized=False)

    @classmethod
    def allow_with_context(cls, context: Mapping[str, str]) -> 'AuthorizerResponse':
        return cls(isAuthorized=True, context=dict(context))

    @classmethod
    def deny_with_context(cls, context: Mapping[str, str]) -> 'AuthorizerResponse':
        return cls(isAuthorized=False, context=dict(context))

    def __str__(self):
        return 'Authorized' if self.isAuthorized else 'Unauthorized'

    def api_gateway_response(self) -> SimpleAuthorizerResponse:
        response = SimpleAuthorizerResponse(isAuthorized=self.isAuthorized)

        if self.context is not None:
            response['context'] = dict(self.context)

        logger.info(f'Sending {self}')

        return response
