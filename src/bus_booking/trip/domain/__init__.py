from .entity import Trip as Trip
from .exception import TripNotFoundException as TripNotFoundException
from .repository import TripRepository as TripRepository
from .value_object import SearchCriteria as SearchCriteria
from .value_object import StopPoint as StopPoint
