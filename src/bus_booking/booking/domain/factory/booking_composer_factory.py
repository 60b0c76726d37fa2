from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.trip.domain.entity import Trip


class BookingComposerFactory:
    """予約組み立て集約のファクトリ

    - 乗車地点 / 降車地点の既定値（便の一覧の先頭）を設定する
    """

    def create(self, trip: Trip) -> BookingComposer:
        boarding = trip.default_boarding_point()
        dropping = trip.default_dropping_point()

        return BookingComposer(
            trip=trip,
            boarding_point=boarding.location if boarding else "",
            dropping_point=dropping.location if dropping else "",
        )
