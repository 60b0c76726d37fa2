from typing import Optional

from bus_booking.booking.domain.entity.seat_selection import SeatSelection
from bus_booking.booking.domain.enum import BookingState, PassengerField, SeatToggle
from bus_booking.booking.domain.event import (
    BookingConfirmed,
    BookingRejected,
    BookingSubmitted,
)
from bus_booking.booking.domain.exception import (
    BookingLockedException,
    BookingSubmissionException,
    EmptySelectionException,
    IncompletePassengerException,
    NotValidatedException,
    SubmissionInProgressException,
)
from bus_booking.booking.domain.gateway import BookingGateway
from bus_booking.booking.domain.value_object import (
    DEFAULT_PAYMENT_METHOD,
    DEFAULT_REJECTION_REASON,
    BookingConfirmation,
    BookingRejection,
    BookingRequest,
    BookingResult,
    PassengerDetail,
    PassengerRecord,
    PriceSummary,
)
from bus_booking.shared.domain import AggregateRoot, TripId
from bus_booking.trip.domain.entity import Trip


class BookingComposer(AggregateRoot[TripId]):
    """予約の組み立て（座席選択 + 乗客情報 + 乗降地点 + 送信）

    - 乗客レコードのキー集合は常に選択中の座席集合と一致する
    - 料金は呼び出しの度に現在の座席数から計算する
    - 送信中・確定後は変更を受け付けない
    """

    def __init__(
        self,
        trip: Trip,
        boarding_point: str = "",
        dropping_point: str = "",
    ) -> None:
        super().__init__(trip.id)

        self._trip = trip
        self._selection = SeatSelection(trip)
        self._passengers: dict[int, PassengerRecord] = {}
        self._boarding_point = boarding_point
        self._dropping_point = dropping_point

        self._edited = False
        self._validated = False
        self._submitting = False
        self._confirmation: Optional[BookingConfirmation] = None
        self._last_rejection: Optional[BookingRejection] = None

        self._sync_passengers()

    @property
    def trip(self) -> Trip:
        return self._trip

    @property
    def seat_limit(self) -> int:
        return self._selection.limit

    @property
    def selected_seats(self) -> tuple[int, ...]:
        return self._selection.seats

    @property
    def passengers(self) -> tuple[PassengerRecord, ...]:
        """乗客レコード（座席の選択順）"""
        return tuple(self._passengers[seat] for seat in self._selection.seats)

    @property
    def boarding_point(self) -> str:
        return self._boarding_point

    @property
    def dropping_point(self) -> str:
        return self._dropping_point

    @property
    def confirmation(self) -> Optional[BookingConfirmation]:
        return self._confirmation

    @property
    def last_rejection(self) -> Optional[BookingRejection]:
        return self._last_rejection

    @property
    def state(self) -> BookingState:
        if self._confirmation is not None:
            return BookingState.CONFIRMED
        if self._submitting:
            return BookingState.SUBMITTING
        if self._validated:
            return BookingState.VALIDATED
        if len(self._selection) == 0:
            return BookingState.BROWSING
        if self._edited or self._last_rejection is not None:
            return BookingState.COMPOSING
        return BookingState.SELECTING

    def is_booked(self, seat_number: int) -> bool:
        return self._selection.is_booked(seat_number)

    def is_selected(self, seat_number: int) -> bool:
        return self._selection.is_selected(seat_number)

    def passenger(self, seat_number: int) -> Optional[PassengerRecord]:
        return self._passengers.get(seat_number)

    def toggle_seat(self, seat_number: int) -> SeatToggle:
        """座席を選択 / 選択解除し、乗客レコードを同期する"""
        self._ensure_mutable()
        result = self._selection.toggle(seat_number)
        if result != SeatToggle.UNAVAILABLE:
            self._validated = False
            self._sync_passengers()
        return result

    def update_passenger_field(
        self, seat_number: int, field: PassengerField | str, value: object
    ) -> None:
        """指定座席の乗客レコードの1フィールドを更新する

        選択解除済みの座席に対する更新は何もしない。
        """
        self._ensure_mutable()
        record = self._passengers.get(seat_number)
        if record is None:
            return
        self._passengers[seat_number] = record.with_field(field, value)
        self._edited = True
        self._validated = False

    def set_boarding_point(self, location: str) -> None:
        self._ensure_mutable()
        self._boarding_point = location
        self._validated = False

    def set_dropping_point(self, location: str) -> None:
        self._ensure_mutable()
        self._dropping_point = location
        self._validated = False

    def price_summary(self) -> PriceSummary:
        return PriceSummary(
            seat_count=len(self._selection), per_seat_price=self._trip.price
        )

    def validate(self) -> None:
        """送信可能かを検証する

        Raises:
            EmptySelectionException: 座席が1つも選択されていない
            IncompletePassengerException: 氏名・年齢が未入力の乗客（選択順で最初）
        """
        if len(self._selection) == 0:
            self._validated = False
            raise EmptySelectionException()

        for record in self.passengers:
            if not record.is_complete():
                self._validated = False
                raise IncompletePassengerException(record.seat_number)

        self._validated = True

    def build_request(self) -> BookingRequest:
        """検証済みの下書きから予約リクエストを組み立てる"""
        if not self._validated:
            raise NotValidatedException("validate() must succeed before build_request()")

        return BookingRequest(
            trip_id=self._trip.id,
            passengers=tuple(
                PassengerDetail(
                    seat_number=record.seat_number,
                    name=record.name,
                    age=record.age,
                    gender=record.gender,
                )
                for record in self.passengers
            ),
            boarding_point=self._boarding_point,
            dropping_point=self._dropping_point,
            payment_method=DEFAULT_PAYMENT_METHOD,
        )

    async def submit(self, gateway: BookingGateway, auth_token: str) -> BookingResult:
        """予約を送信する

        検証に失敗した場合はゲートウェイを呼ばずに例外を送出する。
        送信は1回だけ行い、リトライはしない。
        却下された場合も座席選択と乗客情報はそのまま残る。
        """
        if self._submitting:
            raise SubmissionInProgressException("A booking submission is already in flight")
        self._ensure_mutable()

        self.validate()
        request = self.build_request()

        self._submitting = True
        self.add_domain_event(
            BookingSubmitted(trip_id=self._trip.id, seat_numbers=request.seat_numbers)
        )
        try:
            reservation_id = await gateway.submit(request, auth_token)
        except BookingSubmissionException as e:
            rejection = BookingRejection(reason=e.reason or DEFAULT_REJECTION_REASON)
            self._last_rejection = rejection
            self._validated = False
            self.add_domain_event(
                BookingRejected(trip_id=self._trip.id, reason=rejection.reason)
            )
            return rejection
        finally:
            self._submitting = False

        self._confirmation = BookingConfirmation(reservation_id=reservation_id)
        self._last_rejection = None
        self.add_domain_event(
            BookingConfirmed(
                trip_id=self._trip.id,
                reservation_id=str(reservation_id),
                seat_numbers=request.seat_numbers,
            )
        )
        return self._confirmation

    def _ensure_mutable(self) -> None:
        if self._submitting:
            raise BookingLockedException("Booking is being submitted")
        if self._confirmation is not None:
            raise BookingLockedException("Booking is already confirmed")

    def _sync_passengers(self) -> None:
        """乗客レコードを選択中の座席集合に合わせる

        新しく選ばれた座席には既定値のレコードを末尾に追加し、
        選択解除された座席のレコードは破棄する。残った座席のレコードは変更しない。
        """
        selected = self._selection.seats
        for seat in list(self._passengers):
            if seat not in selected:
                del self._passengers[seat]
        for seat in selected:
            if seat not in self._passengers:
                self._passengers[seat] = PassengerRecord(seat_number=seat)
