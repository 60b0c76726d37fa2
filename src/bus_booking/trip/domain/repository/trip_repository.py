from abc import ABC, abstractmethod
from typing import Optional

from bus_booking.shared.domain import TripId
from bus_booking.trip.domain.entity import Trip
from bus_booking.trip.domain.value_object import SearchCriteria


class TripRepository(ABC):
    """便レポジトリ（路線ディレクトリサービスの読み取り専用ポート）

    通信障害は ServiceUnavailableException として送出する。
    """

    @abstractmethod
    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        """便IDで検索（存在しなければ None）"""
        raise NotImplementedError

    @abstractmethod
    async def search(self, criteria: SearchCriteria) -> list[Trip]:
        """検索条件に合う便をサービスの返却順で返す"""
        raise NotImplementedError
