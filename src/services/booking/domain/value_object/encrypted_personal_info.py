from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from services.booking.domain.enum import ErrorCode
from services.shared.domain import ApplicationError

HEX_PREFIX = "0x"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_JSON_SCALARS = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class EncryptedPersonalInfo:
    """エンコード済みの個人情報

    JSON 文字列の UTF-8 バイト列を 0x 付きの16進文字列にしたもの。
    可逆なエンコードであり、暗号化ではない（秘匿性はない）。
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def encode(cls, info: Mapping[str, Any]) -> EncryptedPersonalInfo:
        """個人情報をエンコードする"""
        if not isinstance(info, Mapping) or not _is_json_object(dict(info)):
            raise ApplicationError(ErrorCode.INVALID_PERSONAL_INFO)
        try:
            text = json.dumps(
                dict(info), ensure_ascii=False, allow_nan=False, separators=(",", ":")
            )
        except (TypeError, ValueError) as e:
            raise ApplicationError(ErrorCode.INVALID_PERSONAL_INFO) from e
        return cls(value=HEX_PREFIX + text.encode("utf-8").hex())

    def decode(self) -> dict[str, Any]:
        """エンコード済みの文字列を個人情報に戻す"""
        if not isinstance(self.value, str):
            raise ApplicationError(ErrorCode.INVALID_ENCRYPTED_PERSONAL_INFO)
        digits = self.value.removeprefix(HEX_PREFIX)
        if not digits or len(digits) % 2 or not _HEX_DIGITS.issuperset(digits):
            raise ApplicationError(ErrorCode.INVALID_ENCRYPTED_PERSONAL_INFO)
        try:
            info = json.loads(bytes.fromhex(digits).decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise ApplicationError(ErrorCode.INVALID_ENCRYPTED_PERSONAL_INFO) from e
        if not isinstance(info, dict):
            raise ApplicationError(ErrorCode.INVALID_ENCRYPTED_PERSONAL_INFO)
        return info


def _is_json_object(value: object) -> bool:
    """JSON から同じ値に戻せる形か（キーは str、コンテナは dict と list のみ）"""
    if isinstance(value, dict):
        return all(
            isinstance(k, str) and _is_json_object(v) for k, v in value.items()
        )
    if isinstance(value, list):
        return all(_is_json_object(v) for v in value)
    return isinstance(value, _JSON_SCALARS)
