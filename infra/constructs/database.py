from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct

BOOKING_ID_INDEX = "GSI1"


def _string_key(name: str) -> dynamodb.Attribute:
    return dynamodb.Attribute(name=name, type=dynamodb.AttributeType.STRING)


class Database(Construct):
    """予約テーブルの Construct

    - PK=BOOKING#<予約ハッシュ>, SK=BOOKING（条件付き書き込みで一意性を保証）
    - GSI1PK=BOOKING_ID#<予約レコードID>（ID による取得・削除用）
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
    ) -> None:
        super().__init__(scope, id)

        self.table = dynamodb.Table(
            self,
            "BookingTable",
            partition_key=_string_key("PK"),
            sort_key=_string_key("SK"),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=removal_policy,
        )
        self.table.add_global_secondary_index(
            index_name=BOOKING_ID_INDEX,
            partition_key=_string_key("GSI1PK"),
            sort_key=_string_key("GSI1SK"),
        )
