from .service_kind import ServiceKind as ServiceKind
