from .exceptions import BookingLockedException as BookingLockedException
from .exceptions import BookingNotFoundException as BookingNotFoundException
from .exceptions import BookingSubmissionException as BookingSubmissionException
from .exceptions import BookingValidationException as BookingValidationException
from .exceptions import EmptySelectionException as EmptySelectionException
from .exceptions import (
    IncompletePassengerException as IncompletePassengerException,
)
from .exceptions import InvalidSeatException as InvalidSeatException
from .exceptions import NotValidatedException as NotValidatedException
from .exceptions import (
    SelectionCapacityExceededException as SelectionCapacityExceededException,
)
from .exceptions import (
    SubmissionInProgressException as SubmissionInProgressException,
)
