from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


FieldErrorKind = Literal["missing", "cast", "rule"]


@dataclass(frozen=True)
class FieldError:
    """永続化層が報告するフィールド単位のエラー

    - missing: 必須フィールドが存在しない
    - cast: 型変換に失敗した
    - rule: フィールドのルールに違反した（message にルールのコードが入る）
    """

    field: str
    kind: FieldErrorKind
    message: str


class FieldValidationException(DomainException):
    """永続化前のスキーマ検証で検出されたフィールドエラー"""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        summary = ", ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(f"Field validation failed ({summary})")


class ApplicationError(DomainException):
    """呼び出し元へ返すアプリケーションエラー

    安定したエラーコードを一つだけ持つ。str 型の Enum も受け付ける。
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code: str = getattr(code, "value", code)
        super().__init__(message or self.code)
