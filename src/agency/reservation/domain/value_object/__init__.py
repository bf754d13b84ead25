from .reservation_request import ReservationRequest as ReservationRequest
from .validation_error import ValidationError as ValidationError
