from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from httpapi import config

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Validity(BaseModel):
    model_config = ConfigDict(frozen=True)

    notBefore: StrictStr
    notAfter: StrictStr


class ClientCert(BaseModel):
    model_config = ConfigDict(frozen=True)

    clientCertPem: StrictStr
    subjectDN: StrictStr
    issuerDN: StrictStr
    serialNumber: StrictStr
    validity: Validity


class Authentication(BaseModel):
    model_config = ConfigDict(frozen=True)

    clientCert: Optional[ClientCert] = None


class JWT(BaseModel):
    model_config = ConfigDict(frozen=True)

    claims: Dict[str, Any] = Field(default_factory=dict)
    scopes: Optional[List[StrictStr]] = None


class Authorizer(BaseModel):
    """
    Authorizer output forwarded to the integration

    Only present in proxy events for routes that have an authorizer attached.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    jwt: Optional[JWT] = None
    lambda_: Optional[Dict[str, Any]] = Field(None, alias='lambda')


class Http(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: StrictStr
    path: StrictStr
    protocol: StrictStr
    sourceIp: StrictStr
    userAgent: StrictStr


class RequestContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    accountId: StrictStr
    apiId: StrictStr
    authentication: Optional[Authentication] = None
    authorizer: Optional[Authorizer] = None
    domainName: StrictStr
    domainPrefix: Optional[StrictStr] = None
    http: Http
    requestId: Optional[StrictStr] = None
    routeKey: StrictStr
    stage: StrictStr
    time: StrictStr
    timeEpoch: StrictInt

    @property
    def structured_time(self) -> Optional[datetime]:
        """
        The request time as an aware UTC datetime, derived from timeEpoch

        This is None if structured time is disabled in the configuration.
        """

        if not config.STRUCTURED_TIME:
            return None

        return EPOCH + timedelta(milliseconds=self.timeEpoch)


class RequestAccessors:
    """
    Convenience accessors shared by both payload kinds

    Expects the payload to have requestContext, headers and cookies fields.
    """

    @property
    def method(self) -> str:
        return self.requestContext.http.method

    @property
    def source_ip(self) -> str:
        return self.requestContext.http.sourceIp

    @property
    def user_agent(self) -> str:
        return self.requestContext.http.userAgent

    @property
    def protocol(self) -> str:
        return self.requestContext.http.protocol

    @property
    def stage(self) -> str:
        return self.requestContext.stage

    @property
    def timestamp(self) -> float:
        """
        Seconds since the epoch
        """
        return self.requestContext.timeEpoch / 1000

    @property
    def structured_time(self) -> Optional[datetime]:
        return self.requestContext.structured_time

    def header(self, name: str) -> Optional[str]:
        if name in self.headers:
            return self.headers[name]

        for k, v in self.headers.items():
            if k.lower() == name.lower():
                return v

        return None

    def cookie_map(self) -> Optional[Dict[str, str]]:
        """
        The request cookies as a name -> value mapping

        Entries that are not of the form 'name=value' are skipped.
        Returns None if the request had no cookies.
        """

        if self.cookies is None:
            return None

        result = {}
        for cookie in self.cookies:
            parts = cookie.split('=')
            if len(parts) != 2:
                continue
            result[parts[0]] = parts[1]

        return result
