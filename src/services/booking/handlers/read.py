from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.get_booking import GetBookingService
from services.booking.domain.value_object import BookingHash
from services.booking.handlers.response_models import to_error_response, to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import ApplicationError
from services.shared.utils import api_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = GetBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約取得 Lambda Handler（パスパラメータは予約ハッシュ）"""
    path_params = event.path_parameters or {}
    booking_hash = path_params.get("booking")

    if not booking_hash:
        return api_response(400, {"message": "booking hash is required"})

    logger.append_keys(booking_hash=booking_hash)
    logger.info("Fetching booking")

    try:
        booking = service.get(BookingHash(value=booking_hash))
        return api_response(200, to_response(booking))
    except ApplicationError as e:
        logger.warning("Booking lookup failed", extra={"code": e.code})
        return to_error_response(e)
    except Exception:
        logger.exception("Failed to fetch booking")
        return api_response(500, {"message": "Internal server error"})
