from dataclasses import dataclass

from src.users_service.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
