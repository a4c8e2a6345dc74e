from .db_manage import DbManageService
from .db_session import DbSessionService
from .db_utils import commit

__all__ = ["DbManageService", "DbSessionService", "commit"]
