from .search_criteria import SearchCriteria as SearchCriteria
from .stop_point import StopPoint as StopPoint
