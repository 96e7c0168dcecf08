from .error_code import ErrorCode as ErrorCode
from .payment_type import PaymentType as PaymentType
from .room_type import RoomType as RoomType
