from pathlib import Path

from aws_cdk import (
    Stack,
    aws_lambda as _lambda,
    aws_apigateway as apigateway,
    aws_iam as iam,
    aws_logs as logs,
    aws_secretsmanager as secretsmanager,
    Duration,
    CfnOutput,
    BundlingOptions,
)
from constructs import Construct

CDK_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = CDK_DIR.parent


class StatsStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        deployment_env: str,
        goodreads_user_id: str,
        goodreads_secret_name: str = "goodreads-api-key",
        spotify_secret_name: str = "spotify-credentials",
        bundle_layer: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.deployment_env = deployment_env

        # Shared layer carrying the taste package and its requirements
        if bundle_layer:
            layer_code = _lambda.Code.from_asset(
                str(PROJECT_ROOT),
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_11.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install . -t /asset-output/python && echo 'Lambda layer bundling complete'",
                    ],
                ),
            )
        else:
            layer_code = _lambda.Code.from_asset(str(PROJECT_ROOT), exclude=["cdk", "tests", "*.md", ".git"])

        lambda_layer = _lambda.LayerVersion(
            self,
            "SharedLayer",
            code=layer_code,
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_11],
            description="taste package and dependencies for the stats Lambda",
        )

        # Both secrets are created and filled outside of CDK
        goodreads_secret = secretsmanager.Secret.from_secret_name_v2(
            self, "GoodreadsSecret", goodreads_secret_name
        )
        spotify_secret = secretsmanager.Secret.from_secret_name_v2(
            self, "SpotifySecret", spotify_secret_name
        )

        stats_role = iam.Role(
            self,
            "StatsRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ],
        )
        goodreads_secret.grant_read(stats_role)
        spotify_secret.grant_read(stats_role)
        # Token refresh writes the new bundle back
        spotify_secret.grant_write(stats_role)

        stats_log_group = logs.LogGroup(
            self,
            "StatsLogGroup",
            log_group_name=f"/aws/lambda/Stats-{deployment_env}",
            retention=(
                logs.RetentionDays.ONE_WEEK
                if deployment_env != "prod"
                else logs.RetentionDays.ONE_MONTH
            ),
        )

        self.stats_function = _lambda.Function(
            self,
            "Stats",
            runtime=_lambda.Runtime.PYTHON_3_11,
            handler="lambda_function.lambda_handler",
            code=_lambda.Code.from_asset(str(CDK_DIR / "lambda_code" / "stats")),
            timeout=Duration.seconds(30),
            memory_size=256,
            role=stats_role,
            environment={
                "GOODREADS_USER_ID": goodreads_user_id,
                "GOODREADS_SECRET_NAME": goodreads_secret_name,
                "SPOTIFY_SECRET_NAME": spotify_secret_name,
                "ENVIRONMENT": deployment_env,
                "PYTHONPATH": "/opt:/var/runtime",
                "LOG_LEVEL": "INFO" if deployment_env == "prod" else "DEBUG",
            },
            layers=[lambda_layer],
            log_group=stats_log_group,
        )

        self.api = apigateway.RestApi(
            self,
            "StatsApi",
            rest_api_name=f"Stats API ({deployment_env})",
            description=f"Spotify and Goodreads stats - {deployment_env}",
            default_cors_preflight_options=apigateway.CorsOptions(
                allow_origins=apigateway.Cors.ALL_ORIGINS,
                allow_methods=["GET", "OPTIONS"],
            ),
        )

        # GET /stats - non-proxy, the handler returns {statusCode, body}
        stats_integration = apigateway.LambdaIntegration(
            self.stats_function,
            proxy=False,
            integration_responses=[
                apigateway.IntegrationResponse(
                    status_code="200",
                    response_templates={"application/json": "$input.json('$.body')"},
                    response_parameters={
                        "method.response.header.Access-Control-Allow-Origin": "'*'"
                    },
                ),
                # Lambda errors carry an errorMessage; map them to 502
                apigateway.IntegrationResponse(
                    selection_pattern=".+",
                    status_code="502",
                    response_templates={
                        "application/json": "{\"error\": \"$util.escapeJavaScript($input.path('$.errorMessage'))\"}"
                    },
                    response_parameters={
                        "method.response.header.Access-Control-Allow-Origin": "'*'"
                    },
                ),
            ],
        )
        stats_resource = self.api.root.add_resource("stats")
        stats_resource.add_method(
            "GET",
            stats_integration,
            method_responses=[
                apigateway.MethodResponse(
                    status_code="200",
                    response_parameters={
                        "method.response.header.Access-Control-Allow-Origin": True
                    },
                ),
                apigateway.MethodResponse(
                    status_code="502",
                    response_parameters={
                        "method.response.header.Access-Control-Allow-Origin": True
                    },
                ),
            ],
        )

        # Outputs
        CfnOutput(self, "ApiUrl", value=self.api.url, description="API Gateway URL")

        CfnOutput(
            self,
            "StatsFunctionArn",
            value=self.stats_function.function_arn,
            description="Stats Lambda ARN",
        )
