from .validate_request import ReservationRequestValidator as ReservationRequestValidator
