from .book_service import ServiceCatalog as ServiceCatalog
