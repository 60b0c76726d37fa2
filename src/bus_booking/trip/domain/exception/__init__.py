from .exceptions import TripNotFoundException as TripNotFoundException
