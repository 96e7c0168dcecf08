import json

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.config import BookingConfig
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_error_response, to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.ssm_price_oracle import SsmPriceOracle
from services.shared.domain import ApplicationError
from services.shared.utils import api_response

logger = Logger()

config = BookingConfig.from_env()
repository = DynamoDBBookingRepository()
factory = BookingFactory(config=config, price_oracle=SsmPriceOracle())
service = CreateBookingService(repository=repository, factory=factory)


def _parse_body(event: APIGatewayProxyEvent) -> dict | None:
    """リクエストボディを JSON オブジェクトとして取り出す（空なら空の辞書）"""
    try:
        payload = event.json_body
    except json.JSONDecodeError:
        return None
    if payload is None:
        return {}
    return payload if isinstance(payload, dict) else None


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create booking request")

    payload = _parse_body(event)
    if payload is None:
        return api_response(400, {"message": "Request body must be a JSON object"})
    request = CreateBookingRequest.model_validate(payload)

    try:
        booking = service.create(request.to_booking_details(), request.personal_info)
        logger.append_keys(booking_hash=str(booking.booking_hash))
        response = to_response(booking)
    except ApplicationError as e:
        logger.warning("Booking rejected", extra={"code": e.code})
        return to_error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return api_response(500, {"message": "Internal server error"})

    logger.info("Booking created")
    return api_response(201, response)
