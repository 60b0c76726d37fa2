from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """集約ルート

    配下の状態（座席選択・乗客情報）の変更は必ず集約ルートを経由する。
    状態遷移はドメインイベントとして記録し、アプリケーション層が
    flush_domain_events で取り出してログに残す。
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._pending_events: list[object] = []

    @property
    def pending_events(self) -> tuple[object, ...]:
        return tuple(self._pending_events)

    def add_domain_event(self, event: object) -> None:
        self._pending_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """記録順にイベントを返し、保持しているイベントを空にする"""
        events, self._pending_events = self._pending_events, []
        return events
