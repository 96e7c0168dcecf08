from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.delete_booking import DeleteBookingService
from services.booking.domain.value_object import BookingId
from services.booking.handlers.response_models import to_error_response, to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import ApplicationError
from services.shared.utils import api_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = DeleteBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約削除 Lambda Handler（パスパラメータは予約レコードID）"""
    path_params = event.path_parameters or {}
    booking_id = path_params.get("booking")

    if not booking_id:
        return api_response(400, {"message": "booking id is required"})

    logger.info("Deleting booking", extra={"booking_id": booking_id})

    try:
        booking = service.delete(BookingId(value=booking_id))
        logger.append_keys(booking_hash=str(booking.booking_hash))
        logger.info("Booking deleted")
        return api_response(200, to_response(booking))
    except ApplicationError as e:
        logger.warning("Booking deletion failed", extra={"code": e.code})
        return to_error_response(e)
    except Exception:
        logger.exception("Failed to delete booking")
        return api_response(500, {"message": "Internal server error"})
