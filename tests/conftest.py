import copy

import pytest

REQUEST_CONTEXT = {
    'accountId': '123456789012',
    'apiId': 'api-id',
    'domainName': 'id.execute-api.us-east-1.amazonaws.com',
    'domainPrefix': 'id',
    'http': {
        'method': 'POST',
        'path': '/my/path',
        'protocol': 'HTTP/1.1',
        'sourceIp': '192.0.2.1',
        'userAgent': 'agent'
    },
    'requestId': 'id',
    'routeKey': '$default',
    'stage': '$default',
    'time': '04/Mar/2020:19:03:58 +0000',
    'timeEpoch': 1583348638390
}

PROXY_EVENT = {
    'version': '2.0',
    'routeKey': '$default',
    'rawPath': '/my/path',
    'rawQueryString': 'parameter1=value1&parameter1=value2&parameter2=value',
    'cookies': ['cookie1=value1', 'cookie2=value2'],
    'headers': {
        'header1': 'value1',
        'Header2': 'value1,value2'
    },
    'queryStringParameters': {
        'parameter1': 'value1,value2',
        'parameter2': 'value'
    },
    'requestContext': {
        **REQUEST_CONTEXT,
        'authentication': {
            'clientCert': {
                'clientCertPem': 'CERT_CONTENT',
                'subjectDN': 'www.example.com',
                'issuerDN': 'Example issuer',
                'serialNumber': 'a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1',
                'validity': {
                    'notBefore': 'May 28 12:30:02 2019 GMT',
                    'notAfter': 'Aug  5 09:36:04 2021 GMT'
                }
            }
        },
        'authorizer': {
            'lambda': {
                'type': 'sudo',
                'user_type': 'admin'
            }
        }
    },
    'body': 'Hello from Lambda',
    'pathParameters': {'parameter1': 'value1'},
    'isBase64Encoded': False,
    'stageVariables': {'stageVariable1': 'value1'}
}

AUTHORIZER_EVENT = {
    'version': '2.0',
    'type': 'REQUEST',
    'routeArn': 'arn:x',
    'identitySource': ['abc'],
    'path': '/pass',
    'httpMethod': 'GET',
    'headers': {},
    'requestContext': {
        'accountId': '1',
        'apiId': 'a',
        'domainName': 'd',
        'http': {
            'method': 'GET',
            'path': '/pass',
            'protocol': 'HTTP/1.1',
            'sourceIp': '1.2.3.4',
            'userAgent': 'ua'
        },
        'routeKey': '$default',
        'stage': '$default',
        'time': 't',
        'timeEpoch': 0
    }
}


@pytest.fixture
def proxy_event():
    return copy.deepcopy(PROXY_EVENT)


@pytest.fixture
def authorizer_event():
    return copy.deepcopy(AUTHORIZER_EVENT)


@pytest.fixture
def authorizer_event_for():
    def make(path):
        event = copy.deepcopy(AUTHORIZER_EVENT)
        event['path'] = path
        event['requestContext']['http']['path'] = path
        return event

    return make
