from .service_record_store import ServiceRecordStore
from .http_record_store import HttpRecordStore

__all__ = [
    "ServiceRecordStore",
    "HttpRecordStore",
]
