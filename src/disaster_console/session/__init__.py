"""管理员会话。"""

from .storage import TokenStorage
from .store import INVALID_CREDENTIALS_MESSAGE, LoginResult, SessionStore

__all__ = [
    "INVALID_CREDENTIALS_MESSAGE",
    "LoginResult",
    "SessionStore",
    "TokenStorage",
]
