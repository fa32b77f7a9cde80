"""
Raw shapes of the payload format 2.0 JSON documents, as delivered by (and returned to) the Lambda runtime.
"""

from typing import Any, Dict, List, TypedDict, Literal, Optional


class Validity(TypedDict):
    notBefore: str
    notAfter: str


class ClientCert(TypedDict):
    clientCertPem: str
    subjectDN: str
    issuerDN: str
    serialNumber: str
    validity: Validity


class Authentication(TypedDict):
    clientCert: Optional[ClientCert]


class JWT(TypedDict):
    claims: Dict[str, Any]
    scopes: Optional[List[str]]


# 'lambda' is a keyword, so the functional syntax is needed
Authorizer = TypedDict('Authorizer', {'jwt': JWT, 'lambda': Dict[str, Any]}, total=False)


class Http(TypedDict):
    method: str
    path: str
    protocol: str
    sourceIp: str
    userAgent: str


class _RequestContextOptional(TypedDict, total=False):
    authentication: Authentication
    authorizer: Authorizer
    domainPrefix: str
    requestId: str


class RequestContext(_RequestContextOptional):
    accountId: str
    apiId: str
    domainName: str
    http: Http
    routeKey: str
    stage: str
    time: str
    timeEpoch: int


class _HttpEventOptional(TypedDict, total=False):
    cookies: List[str]
    queryStringParameters: Dict[str, str]
    body: str
    pathParameters: Dict[str, str]
    stageVariables: Dict[str, str]


class HttpEvent(_HttpEventOptional):
    version: Literal['2.0']
    routeKey: str
    rawPath: str
    rawQueryString: str
    headers: Dict[str, str]
    requestContext: RequestContext
    isBase64Encoded: bool


class _AuthorizerEventOptional(TypedDict, total=False):
    authorizationToken: str
    resource: str
    queryStringParameters: Dict[str, str]
    pathParameters: Dict[str, str]
    stageVariables: Dict[str, str]
    routeKey: str
    rawPath: str
    rawQueryString: str
    cookies: List[str]


class AuthorizerEvent(_AuthorizerEventOptional):
    version: Literal['2.0']
    type: str
    routeArn: str
    identitySource: List[str]
    path: str
    httpMethod: str
    headers: Dict[str, str]
    requestContext: RequestContext


class _HttpResponseOptional(TypedDict, total=False):
    body: str


class HttpResponse(_HttpResponseOptional):
    statusCode: int
    headers: Dict[str, str]
    cookies: List[str]
    isBase64Encoded: bool


class _AuthorizerResponseOptional(TypedDict, total=False):
    context: Dict[str, str]


class SimpleAuthorizerResponse(_AuthorizerResponseOptional):
    isAuthorized: bool
