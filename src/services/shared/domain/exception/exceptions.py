from collections.abc import Iterable


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値が不正な場合（呼び出し側の誤り、リトライ不可）"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない、または無効化されている場合"""

    pass


class SeatNotFoundException(ResourceNotFoundException):
    """座席表に存在しない座席番号が指定された場合"""

    def __init__(self, seat_numbers: Iterable[str]) -> None:
        self.seat_numbers = tuple(seat_numbers)
        super().__init__(f"Seats not found: {', '.join(self.seat_numbers)}")


class ConflictException(DomainException):
    """現在の状態と競合する場合"""

    pass


class DuplicateResourceException(ConflictException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(ConflictException):
    """楽観ロックの競合エラー（version が読み取り時と異なる場合）"""

    pass


class SeatAlreadyBookedException(ConflictException):
    """予約済みの座席を予約しようとした場合"""

    def __init__(self, seat_number: str) -> None:
        self.seat_number = seat_number
        super().__init__(f"Seat already booked: {seat_number}")


class SeatConflictException(ConflictException):
    """要求された座席のうち予約済みのものがある場合

    競合した座席はまとめて報告する。
    """

    def __init__(self, seat_numbers: Iterable[str]) -> None:
        self.seat_numbers = tuple(seat_numbers)
        super().__init__(f"Seats {', '.join(self.seat_numbers)} are not available")


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（状態遷移として不正な操作）"""

    pass


class SeatNotBookedException(BusinessRuleViolationException):
    """予約されていない座席を解放しようとした場合"""

    def __init__(self, seat_number: str) -> None:
        self.seat_number = seat_number
        super().__init__(f"Seat is not booked: {seat_number}")


class InvalidCapacityDeltaException(BusinessRuleViolationException):
    """空席数の増減結果が [0, 総座席数] を外れる場合"""

    pass


class NotRefundableException(BusinessRuleViolationException):
    """払い戻し可能な状態ではない場合"""

    pass


class ExceedsRefundableException(BusinessRuleViolationException):
    """払い戻し額が払い戻し可能額を超える場合"""

    pass


class ForbiddenException(DomainException):
    """呼び出し元に権限がない場合"""

    pass


class PersistenceException(DomainException):
    """ストレージ層の想定外エラー"""

    pass
