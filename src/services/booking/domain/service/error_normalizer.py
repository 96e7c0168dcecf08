from services.booking.domain.enum import ErrorCode
from services.shared.domain import (
    ApplicationError,
    DuplicateResourceException,
    FieldValidationException,
)


def normalize_persistence_error(error: Exception) -> Exception:
    """永続化層のエラーをアプリケーションエラーに変換する

    - 予約ハッシュの重複 -> duplicateBooking
    - 型変換の失敗 -> invalid<Field>
    - 必須フィールドの欠落 -> no<Field>
    - その他のルール違反 -> ルールに付与されたコード

    最初のフィールドエラーのみを扱う。フィールド情報を持たないエラーや
    語彙にないコードになるエラーは、そのまま返す。
    """
    if isinstance(error, DuplicateResourceException):
        return ApplicationError(ErrorCode.DUPLICATE_BOOKING)
    if not isinstance(error, FieldValidationException) or not error.errors:
        return error

    first = error.errors[0]
    try:
        if first.kind == "cast":
            code = ErrorCode.invalid(first.field)
        elif first.kind == "missing":
            code = ErrorCode.missing(first.field)
        else:
            code = ErrorCode(first.message)
    except ValueError:
        return error
    return ApplicationError(code)
