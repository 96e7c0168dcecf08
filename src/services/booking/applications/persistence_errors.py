from collections.abc import Iterator
from contextlib import contextmanager

from services.booking.domain.service import normalize_persistence_error
from services.shared.domain import DomainException


@contextmanager
def normalized_persistence_errors() -> Iterator[None]:
    """リポジトリ呼び出しで発生したエラーをアプリケーションエラーに変換する"""
    try:
        yield
    except DomainException as e:
        normalized = normalize_persistence_error(e)
        if normalized is e:
            raise
        raise normalized from e
