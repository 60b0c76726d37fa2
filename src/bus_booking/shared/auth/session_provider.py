from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from bus_booking.shared.domain.exception import AuthenticationRequiredException


@dataclass(frozen=True)
class UserSession:
    """ログイン中ユーザーのセッション"""

    user_id: str
    name: str
    auth_token: str

    def __post_init__(self) -> None:
        if not self.auth_token:
            raise ValueError("auth_token cannot be empty")


class SessionProvider(ABC):
    """現在のユーザーと認可トークンを供給するポート"""

    @abstractmethod
    def current_session(self) -> Optional[UserSession]:
        raise NotImplementedError

    def require_session(self) -> UserSession:
        """セッションを返す。未ログインなら AuthenticationRequiredException"""
        session = self.current_session()
        if session is None:
            raise AuthenticationRequiredException()
        return session


class InMemorySessionProvider(SessionProvider):
    """プロセス内にセッションを保持する実装"""

    def __init__(self, session: Optional[UserSession] = None) -> None:
        self._session = session

    def current_session(self) -> Optional[UserSession]:
        return self._session

    def login(self, session: UserSession) -> None:
        self._session = session

    def logout(self) -> None:
        self._session = None
