"""插件基类模块。

定义插件处理器的抽象基类，注册中心只保存 Plugin 实例：

核心方法（子类必须实现）：
- handle(): 处理消息并返回响应（异步）

普通函数（同步或异步）通过 FunctionPlugin 包装后注册，
因此调用方总是以 await plugin.handle(message, context) 的方式调用。
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from pluginbridge.utils.helpers import resolve


class Plugin(ABC):
    """插件抽象基类。

    插件接收桥转发的消息和上下文，返回任意响应值。
    消息和上下文对桥而言是不透明的，桥不会读取或复制它们。

    使用示例：
        class EchoPlugin(Plugin):
            async def handle(self, message, context):
                return {"echo": message}

        bridge.register_plugin("echo", EchoPlugin())
    """

    @abstractmethod
    async def handle(self, message: Any, context: Any) -> Any:
        """处理一条消息。

        Args:
            message: 调用方发送的消息
            context: 本次调用的上下文（中间件可能已修改）

        Returns:
            插件响应
        """
        pass


class FunctionPlugin(Plugin):
    """将普通函数包装为插件。

    函数签名为 (message, context)，返回值若可等待则会被 await。
    """

    def __init__(self, func: Callable[..., Any]):
        self.func = func

    async def handle(self, message: Any, context: Any) -> Any:
        return await resolve(self.func(message, context))

    def __repr__(self) -> str:
        return f"FunctionPlugin({getattr(self.func, '__qualname__', self.func)!r})"
