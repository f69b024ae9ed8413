from dataclasses import dataclass

from src.paperwings.core.services import DbConnectionService, RecordStore


@dataclass
class ApplicationDependencies:
    database_service: DbConnectionService
    record_store: RecordStore
