import json

import pytest
from pydantic import ValidationError

from httpapi.authorizer import AuthorizerResponse
from httpapi.codec import decode_authorizer_payload, encode_response, encode_response_bytes


def test_scenario_allow(authorizer_event):
    payload = decode_authorizer_payload(json.dumps(authorizer_event).encode())

    assert payload.path == '/pass'
    assert encode_response_bytes(AuthorizerResponse.allow()) == b'{"isAuthorized":true}'


def test_allow_and_deny_omit_context():
    assert encode_response(AuthorizerResponse.allow()) == {'isAuthorized': True}
    assert encode_response(AuthorizerResponse.deny()) == {'isAuthorized': False}
    assert 'context' not in AuthorizerResponse.deny().api_gateway_response()


def test_allow_with_context():
    response = AuthorizerResponse.allow_with_context({'type': 'sudo', 'user_type': 'admin'})

    assert encode_response(response) == {
        'isAuthorized': True,
        'context': {'type': 'sudo', 'user_type': 'admin'}
    }


def test_deny_with_context():
    response = AuthorizerResponse.deny_with_context({'type': 'failed', 'user_type': 'visitor'})

    assert encode_response(response) == {
        'isAuthorized': False,
        'context': {'type': 'failed', 'user_type': 'visitor'}
    }


def test_empty_context_is_kept():
    assert encode_response_bytes(AuthorizerResponse.allow_with_context({})) == b'{"isAuthorized":true,"context":{}}'
    assert encode_response(AuthorizerResponse.deny_with_context({})) == {'isAuthorized': False, 'context': {}}


def test_context_is_copied():
    context = {'user': 'a'}
    response = AuthorizerResponse.allow_with_context(context)

    context['user'] = 'b'

    assert response.context == {'user': 'a'}


def test_response_is_immutable():
    response = AuthorizerResponse.allow()

    with pytest.raises(ValidationError):
        response.isAuthorized = False


def test_payload_fields(authorizer_event):
    authorizer_event['queryStringParameters'] = {'q': '1'}
    authorizer_event['authorizationToken'] = 'token'

    payload = decode_authorizer_payload(authorizer_event)

    assert payload.type == 'REQUEST'
    assert payload.routeArn == 'arn:x'
    assert payload.identitySource == ['abc']
    assert payload.httpMethod == 'GET'
    assert payload.method == 'GET'
    assert payload.authorizationToken == 'token'
    assert payload.resource is None
    assert payload.queryStringParameters == {'q': '1'}
    assert payload.pathParameters is None
    assert payload.stageVariables is None


def test_payload_round_trip(authorizer_event):
    authorizer_event.update({
        'authorizationToken': 'token',
        'resource': '/pass',
        'queryStringParameters': {'q': '1'},
        'pathParameters': {'p': '2'},
        'stageVariables': {'s': '3'},
        'routeKey': 'GET /pass',
        'rawPath': '/pass',
        'rawQueryString': 'q=1',
        'cookies': ['a=b']
    })

    payload = decode_authorizer_payload(authorizer_event)

    assert payload.to_dict() == authorizer_event
    assert json.loads(payload.to_json()) == authorizer_event
