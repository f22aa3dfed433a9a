"""插件桥模块：核心调度引擎。

连接宿主应用与插件的进程内消息总线：
1. 注册/注销插件（名称唯一）
2. 追加中间件，拦截每一次发送
3. send: 单目标发送，经中间件管道后调用插件
4. broadcast: 并发发送给所有插件，逐个隔离失败
5. on/off: 订阅生命周期事件

核心流程：
   send(name) -> 查找插件 -> 组合管道 -> 执行 -> plugin:message 事件 -> 返回响应

设计要点：
- 单线程 asyncio 协作调度，无内部锁
- 事件发射是同步的，在触发它的调用返回前完成
- 无超时和取消机制，需要时由调用方在外部包装
"""

import asyncio
from typing import Any, Callable

from loguru import logger

from pluginbridge.bus.emitter import DiagnosticSink, EventEmitter, Listener
from pluginbridge.bus.events import PLUGIN_MESSAGE, PLUGIN_REGISTERED, PLUGIN_UNREGISTERED
from pluginbridge.config.schema import BridgeConfig
from pluginbridge.middleware.base import Middleware
from pluginbridge.middleware.chain import MiddlewareChain
from pluginbridge.plugins.base import Plugin
from pluginbridge.plugins.registry import PluginRegistry
from pluginbridge.utils.logging import setup_logging


class PluginBridge:
    """插件桥：插件注册、中间件管道、发送/广播与事件通知。

    使用示例：
        bridge = PluginBridge()
        bridge.register_plugin("echo", lambda message, context: message)
        bridge.use(auth_middleware)
        bridge.on("plugin:message", print)

        response = await bridge.send("echo", {"text": "hi"}, {"user": "alice"})
        responses = await bridge.broadcast({"text": "hello all"})

    Attributes:
        logger: 诊断输出，广播失败和监听器失败通过它的 error 方法报告
        plugins: 插件注册中心
        middlewares: 中间件链
        events: 事件发射器
    """

    def __init__(self, logger: DiagnosticSink | None = None):
        self.logger: DiagnosticSink = logger if logger is not None else _default_sink()
        self.plugins = PluginRegistry()
        self.middlewares = MiddlewareChain()
        self.events = EventEmitter(self.logger)

    @classmethod
    def from_config(cls, config: BridgeConfig | None = None) -> "PluginBridge":
        """按配置初始化日志并创建插件桥。

        Args:
            config: 根配置，为 None 时从环境变量加载
        """
        config = config or BridgeConfig()
        setup_logging(config.logging)
        return cls()

    def register_plugin(self, name: str, handler: Plugin | Callable[..., Any]) -> None:
        """注册插件并发出 plugin:registered 事件。

        Raises:
            InvalidArgument: 名称或处理器不合法
            DuplicatePlugin: 名称已注册
        """
        self.plugins.register(name, handler)
        self.events.emit(PLUGIN_REGISTERED, {"name": name})

    def unregister_plugin(self, name: str) -> None:
        """注销插件。只有确实移除时才发出 plugin:unregistered 事件。"""
        if self.plugins.unregister(name):
            self.events.emit(PLUGIN_UNREGISTERED, {"name": name})

    def use(self, middleware: Middleware | Callable[..., Any]) -> None:
        """追加中间件。

        Raises:
            InvalidArgument: 参数不可调用
        """
        self.middlewares.append(middleware)

    async def send(self, name: str, message: Any, context: Any = None) -> Any:
        """发送消息给指定插件。

        Args:
            name: 插件名称
            message: 消息（原样传递）
            context: 调用上下文，省略时为新的空字典

        Returns:
            管道最终返回的响应

        Raises:
            UnknownPlugin: 插件未注册
        """
        plugin = self.plugins.lookup(name)
        if context is None:
            context = {}

        pipeline = self.middlewares.compose(message, context, plugin.handle)
        logger.debug(f"Sending message to plugin: {name}")
        response = await pipeline()

        self.events.emit(PLUGIN_MESSAGE, {"name": name, "message": message, "response": response})
        return response

    async def broadcast(self, message: Any, context: Any = None) -> list[Any]:
        """广播消息给所有已注册插件。

        调用时对插件名称取快照，所有发送立即并发启动，全部完成后返回。
        单个插件失败被记录并替换为 {"error": <错误信息>}，不影响其他插件。

        Args:
            message: 消息（原样传递给每个插件）
            context: 所有插件共享的上下文，省略时为新的空字典

        Returns:
            与快照顺序一致的响应列表
        """
        if context is None:
            context = {}
        names = self.plugins.names
        logger.debug(f"Broadcasting message to {len(names)} plugin(s)")
        return list(await asyncio.gather(*(self._send_isolated(name, message, context) for name in names)))

    async def _send_isolated(self, name: str, message: Any, context: Any) -> Any:
        try:
            return await self.send(name, message, context)
        except Exception as e:
            self.logger.error(f"Broadcast error for plugin '{name}': {e}")
            return {"error": str(e)}

    def on(self, event: str, listener: Listener) -> None:
        """订阅桥事件。"""
        self.events.subscribe(event, listener)

    def off(self, event: str, listener: Listener) -> None:
        """取消订阅桥事件。重复调用是安全的。"""
        self.events.unsubscribe(event, listener)

    @property
    def plugin_names(self) -> list[str]:
        """已注册插件名称列表。"""
        return self.plugins.names

    @property
    def middleware_count(self) -> int:
        return len(self.middlewares)


def _default_sink() -> DiagnosticSink:
    return logger
