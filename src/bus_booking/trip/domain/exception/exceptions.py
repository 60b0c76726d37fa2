from bus_booking.shared.domain.exception import ResourceNotFoundException


class TripNotFoundException(ResourceNotFoundException):
    """指定した便が路線ディレクトリに存在しない場合"""

    def __init__(self, trip_id: object) -> None:
        super().__init__(f"Trip not found: {trip_id}")
        self.trip_id = trip_id
