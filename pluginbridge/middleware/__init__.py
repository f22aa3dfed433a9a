"""中间件模块。"""

from pluginbridge.middleware.base import FunctionMiddleware, Middleware
from pluginbridge.middleware.chain import MiddlewareChain

__all__ = ["Middleware", "FunctionMiddleware", "MiddlewareChain"]
