from enum import Enum


class RoomType(str, Enum):
    """部屋タイプ"""

    DOUBLE = "double"
    TWIN = "twin"
