from .booking_gateway import BookingGateway as BookingGateway
