import datetime

from aws_cdk import Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import RUNTIME

SERVICE_NAME = "booking-service"
PRICE_PARAMETER_PREFIX = "/booking/prices"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.ILayerVersion,
        price_parameter_prefix: str = PRICE_PARAMETER_PREFIX,
    ) -> None:
        super().__init__(scope, id)

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            table,
            common_layer,
            extra_environment={"PRICE_PARAMETER_PREFIX": price_parameter_prefix},
        )

        self.read_booking = self._create_function(
            "ReadBookingLambda",
            "services.booking.handlers.read.lambda_handler",
            table,
            common_layer,
        )

        self.delete_booking = self._create_function(
            "DeleteBookingLambda",
            "services.booking.handlers.delete.lambda_handler",
            table,
            common_layer,
        )

        table.grant_read_write_data(self.create_booking)
        table.grant_read_data(self.read_booking)
        table.grant_read_write_data(self.delete_booking)

        # 価格オラクル（SSM Parameter Store）の読み取り権限
        self.create_booking.add_to_role_policy(
            iam.PolicyStatement(
                actions=["ssm:GetParameter"],
                resources=[
                    Stack.of(self).format_arn(
                        service="ssm",
                        resource="parameter",
                        resource_name=f"{price_parameter_prefix.strip('/')}/*",
                    )
                ],
            )
        )

    def _create_function(
        self,
        id: str,
        handler: str,
        table: dynamodb.Table,
        common_layer: _lambda.ILayerVersion,
        extra_environment: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(extra_environment or {}),
            },
        )
