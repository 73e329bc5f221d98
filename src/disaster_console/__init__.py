"""灾害管理控制台：后端管理接口的异步客户端与命令行工具。"""

__version__ = "0.1.0"
