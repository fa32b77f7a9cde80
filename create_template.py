#!/usr/bin/env python3
"""
Create the cloudformation template for the example HTTP API

Usage:
    create_template.py [<VERSION>] [--output <PATH>] [--package <ZIP>]
    create_template.py (-h | --help)
    create_template.py (-v | --version)

Options:
    <VERSION>          The version of this template
    --output <PATH>    The file to write the template to
    --package <ZIP>    The lambda package [default: build/lambda.zip]
    --help      Show this screen
    --version   Print the version of this tool

"""
import base64
import hashlib
from typing import Tuple

from docopt import docopt
from troposphere import Template, GetAtt, StackName, Ref, Join, Region, AccountId, Sub, Parameter, Output, Retain
import troposphere.iam as iam
import troposphere.awslambda as awslambda
import troposphere.apigatewayv2 as apigatewayv2

from awacs.aws import PolicyDocument, Statement, Allow, Action, Principal

PAYLOAD_FORMAT_VERSION = '2.0'


def sha256(path) -> Tuple[str, str]:
    with open(path, 'rb') as f:
        h = hashlib.sha256(f.read())

    aws_sha256 = base64.b64encode(h.digest()).decode()
    hex_sha256 = h.hexdigest()
    return aws_sha256, hex_sha256


def lambda_invocation_uri(function) -> Join:
    return Join('', ['arn:aws:apigateway:', Region, ':lambda:path/2015-03-31/functions/',
                     Ref(function), '/invocations'])


class HttpApiTemplate(Template):

    def __init__(self, build_version, package_path='build/lambda.zip'):
        super().__init__(
            Description='HTTP API with a Lambda authorizer',
            Metadata={
                'Comment': 'This template has been generated.',
                'Version': build_version
            }
        )

        self._build_version = build_version
        self._aws_sha256, self._hex_sha256 = sha256(package_path)

        self.set_version()

        self.package_bucket = self.add_parameter(Parameter(
            'PackageBucket',
            Type='String',
            Description='The S3 bucket containing the lambda package'
        ))

        self.log_level = self.add_parameter(Parameter(
            'LogLevel',
            Type='String',
            Default='INFO',
            AllowedValues=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            Description='The log level of the lambda functions'
        ))

        self.add_lambda_role()
        self._authorizer_function = self.add_lambda_function(
            'Authorizer', 'httpapi.handlers.auth_example.handler', 'Request authorizer'
        )
        self._echo_function = self.add_lambda_function(
            'Echo', 'httpapi.handlers.http_echo.handler', 'HTTP echo'
        )
        self.add_api()

    def add_lambda_role(self):
        self._role = self.add_resource(iam.Role(
            'LambdaRole',
            AssumeRolePolicyDocument=PolicyDocument(
                Version='2012-10-17',
                Statement=[Statement(
                    Effect=Allow,
                    Action=[Action('sts', 'AssumeRole')],
                    Principal=Principal('Service', 'lambda.amazonaws.com')
                )]
            ),
            ManagedPolicyArns=['arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole'],
        ))

    def add_lambda_function(self, name: str, handler: str, description: str) -> awslambda.Version:
        lambda_function = self.add_resource(awslambda.Function(
            name,
            Runtime='python3.12',
            Code=awslambda.Code(
                S3Bucket=Ref(self.package_bucket),
                S3Key=f'{self._build_version}/lambda.zip'
            ),
            Handler=handler,
            Timeout=30,
            Role=GetAtt(self._role, 'Arn'),
            Description=Sub('${AWS::StackName} ' + description),
            Environment=awslambda.Environment(
                Variables={
                    'LOG_LEVEL': Ref(self.log_level),
                    'STRUCTURED_TIME': 'true'
                }
            )
        ))

        return self.add_resource(awslambda.Version(
            name + 'Version' + self._hex_sha256,
            CodeSha256=self._aws_sha256,
            Description=self._hex_sha256,
            FunctionName=Ref(lambda_function),
            DependsOn=[lambda_function],
            DeletionPolicy=Retain
        ))

    def add_permission(self, title: str, function, api):
        self.add_resource(awslambda.Permission(
            title,
            Principal='apigateway.amazonaws.com',
            Action='lambda:InvokeFunction',
            FunctionName=Ref(function),
            SourceArn=Join('', ['arn:aws:execute-api:', Region, ':', AccountId, ':', Ref(api), '/*'])
        ))

    def add_api(self):
        api = self.add_resource(apigatewayv2.Api(
            'HttpApi',
            Name=StackName,
            Description='HTTP API with a Lambda authorizer',
            ProtocolType='HTTP',
        ))

        authorizer = self.add_resource(apigatewayv2.Authorizer(
            'HttpApiAuthorizer',
            ApiId=Ref(api),
            Name='LambdaAuthorizer',
            AuthorizerType='REQUEST',
            AuthorizerUri=lambda_invocation_uri(self._authorizer_function),
            AuthorizerPayloadFormatVersion=PAYLOAD_FORMAT_VERSION,
            AuthorizerResultTtlInSeconds=0,
            EnableSimpleResponses=True,
        ))

        integration = self.add_resource(apigatewayv2.Integration(
            'HttpApiIntegration',
            ApiId=Ref(api),
            IntegrationType='AWS_PROXY',
            IntegrationUri=Ref(self._echo_function),
            PayloadFormatVersion=PAYLOAD_FORMAT_VERSION,
        ))

        route = self.add_resource(apigatewayv2.Route(
            'HttpApiDefaultRoute',
            ApiId=Ref(api),
            RouteKey='$default',
            AuthorizationType='CUSTOM',
            AuthorizerId=Ref(authorizer),
            Target=Join('/', ['integrations', Ref(integration)]),
        ))

        self.add_resource(apigatewayv2.Stage(
            'HttpApiStage',
            ApiId=Ref(api),
            StageName='$default',
            AutoDeploy=True,
            DependsOn=[route]
        ))

        self.add_permission('AuthorizerApiGatewayPermission', self._authorizer_function, api)
        self.add_permission('EchoApiGatewayPermission', self._echo_function, api)

        self.add_output(Output(
            'ApiEndpoint',
            Value=GetAtt(api, 'ApiEndpoint')
        ))


def main(arguments):
    version = arguments['<VERSION>'] or 'dev'

    template = HttpApiTemplate(version, arguments['--package'])

    if arguments['--output']:
        with open(arguments['--output'], 'w') as f:
            f.write(template.to_yaml())
    else:
        print(template.to_yaml())


if __name__ == '__main__':
    arguments = docopt(__doc__, version='create_template.py')
    main(arguments)
