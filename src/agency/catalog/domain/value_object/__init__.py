from .reservation_result import ReservationResult as ReservationResult
from .route import Route as Route
from .route_price_table import DESTINATIONS as DESTINATIONS
from .route_price_table import ORIGINS as ORIGINS
from .route_price_table import RoutePriceTable as RoutePriceTable
