# Copyright 2025 msq
from __future__ import annotations


UNABLE_TO_CONNECT_MESSAGE = "Unable to connect to server. Please check your internet connection."


class ConsoleApiError(RuntimeError):
    """后端接口调用失败的基础异常。"""


class AuthenticationError(ConsoleApiError):
    """后端返回 401，凭证无效或会话已失效。"""


class NetworkError(ConsoleApiError):
    """请求未到达后端（连接失败、超时等）。"""

    def __init__(self, message: str = UNABLE_TO_CONNECT_MESSAGE) -> None:
        super().__init__(message)


class ServerError(ConsoleApiError):
    """后端返回非 2xx（401 除外）。"""

    def __init__(self, message: str, *, status_code: int, reason: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ResponseFormatError(ConsoleApiError):
    """响应不是 JSON 或结构不符合预期。"""


class ValidationError(ValueError):
    """提交前的客户端校验失败（必填项、坐标范围、集合类型）。"""
