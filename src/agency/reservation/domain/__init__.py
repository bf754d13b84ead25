from .value_object import ReservationRequest as ReservationRequest
from .value_object import ValidationError as ValidationError
