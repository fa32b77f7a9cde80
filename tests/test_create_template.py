import pytest

from create_template import HttpApiTemplate, main


@pytest.fixture
def package(tmp_path):
    path = tmp_path / 'lambda.zip'
    path.write_bytes(b'PK\x05\x06' + b'\x00' * 18)
    return str(path)


def test_template_resources(package):
    template = HttpApiTemplate('1.0.0', package).to_dict()
    resources = template['Resources']

    types = sorted(resource['Type'] for resource in resources.values())
    assert types.count('AWS::Lambda::Function') == 2
    assert types.count('AWS::Lambda::Version') == 2
    assert types.count('AWS::Lambda::Permission') == 2
    assert 'AWS::ApiGatewayV2::Api' in types
    assert 'AWS::ApiGatewayV2::Stage' in types

    assert resources['Authorizer']['Properties']['Handler'] == 'httpapi.handlers.auth_example.handler'
    assert resources['Echo']['Properties']['Handler'] == 'httpapi.handlers.http_echo.handler'
    assert template['Metadata']['Version'] == '1.0.0'
    assert 'ApiEndpoint' in template['Outputs']


def test_payload_format_version(package):
    resources = HttpApiTemplate('1.0.0', package).to_dict()['Resources']

    authorizer = resources['HttpApiAuthorizer']['Properties']
    assert authorizer['AuthorizerType'] == 'REQUEST'
    assert authorizer['AuthorizerPayloadFormatVersion'] == '2.0'
    assert authorizer['EnableSimpleResponses'] is True

    integration = resources['HttpApiIntegration']['Properties']
    assert integration['IntegrationType'] == 'AWS_PROXY'
    assert integration['PayloadFormatVersion'] == '2.0'

    route = resources['HttpApiDefaultRoute']['Properties']
    assert route['RouteKey'] == '$default'
    assert route['AuthorizationType'] == 'CUSTOM'


def test_main_writes_template(package, tmp_path):
    output = tmp_path / 'template.yaml'

    main({'<VERSION>': '2.3.4', '--output': str(output), '--package': package})

    text = output.read_text()
    assert 'AWS::ApiGatewayV2::Authorizer' in text
    assert '2.3.4' in text
