from dataclasses import dataclass

from user_registry.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
