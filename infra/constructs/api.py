from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    - POST   /booking            -> 予約作成
    - GET    /booking/{booking}  -> 予約ハッシュで取得
    - DELETE /booking/{booking}  -> 予約レコードIDで削除
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.Function,
        read_booking: _lambda.Function,
        delete_booking: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        booking_resource = self.rest_api.root.add_resource("booking")
        booking_resource.add_method("POST", apigw.LambdaIntegration(create_booking))

        # GET と DELETE で同じパス変数を共有する（GET は予約ハッシュ、DELETE はID）
        booking_item = booking_resource.add_resource("{booking}")
        booking_item.add_method("GET", apigw.LambdaIntegration(read_booking))
        booking_item.add_method("DELETE", apigw.LambdaIntegration(delete_booking))
