from .enum import ServiceKind as ServiceKind
from .value_object import DESTINATIONS as DESTINATIONS
from .value_object import ORIGINS as ORIGINS
from .value_object import ReservationResult as ReservationResult
from .value_object import Route as Route
from .value_object import RoutePriceTable as RoutePriceTable
