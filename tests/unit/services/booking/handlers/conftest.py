import os
from dataclasses import dataclass

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "booking-table-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking-service")


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-handler"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-handler"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(method="GET", path="/booking", body=None, path_parameters=None):
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": None,
            "pathParameters": path_parameters,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {"requestId": "test-request"},
        }

    return _factory
