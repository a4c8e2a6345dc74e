from dataclasses import dataclass

from src.selectshop.core.services import DbSessionService, JwtService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_service: JwtService
