from typing import Optional


class DomainException(Exception):
    """ドメイン層で発生する基底例外

    message を省略した場合は default_message（利用者に表示できる文言）を使う。
    """

    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    default_message = "Resource not found"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    default_message = "Operation not allowed"


class ServiceUnavailableException(DomainException):
    """外部サービス（路線ディレクトリ・予約サービス）に到達できない場合"""

    default_message = "Service temporarily unavailable"


class AuthenticationRequiredException(DomainException):
    """ログインセッションが存在しない場合（ワークフロー開始前の事前条件）"""

    default_message = "Please login to book tickets"
