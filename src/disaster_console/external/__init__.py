"""外部服务客户端。"""

from .api_client import ConsoleApiClient, TokenProvider

__all__ = [
    "ConsoleApiClient",
    "TokenProvider",
]
