"""插件注册中心模块。

提供动态插件管理功能：
- 注册/注销插件
- 按名称查找插件
- 列出已注册插件

插件以名称为键存储，名称在任意时刻唯一：
- 重复注册会失败且不修改状态
- 注销不存在的名称是静默的空操作
- 注销后同名重新注册视为全新插件
"""

from typing import Any, Callable

from loguru import logger

from pluginbridge.errors import DuplicatePlugin, InvalidArgument, UnknownPlugin
from pluginbridge.plugins.base import FunctionPlugin, Plugin
from pluginbridge.utils.helpers import is_valid_name


class PluginRegistry:
    """插件注册中心。

    维护 名称 -> Plugin 的映射。事件通知由 PluginBridge 负责，
    注册中心只负责校验和存储。
    """

    def __init__(self):
        self._plugins: dict[str, Plugin] = {}

    def register(self, name: str, handler: Plugin | Callable[..., Any]) -> None:
        """注册插件。

        Args:
            name: 插件名称，必须是非空字符串
            handler: Plugin 实例，或签名为 (message, context) 的函数

        Raises:
            InvalidArgument: 名称或处理器不合法
            DuplicatePlugin: 名称已注册
        """
        if not is_valid_name(name):
            raise InvalidArgument("Plugin name must be a non-empty string.")
        if isinstance(handler, Plugin):
            plugin = handler
        elif callable(handler):
            plugin = FunctionPlugin(handler)
        else:
            raise InvalidArgument("Plugin handler must be a function.")
        if name in self._plugins:
            raise DuplicatePlugin(name)

        self._plugins[name] = plugin
        logger.debug(f"Registered plugin: {name}")

    def unregister(self, name: str) -> bool:
        """注销插件（按名称）。

        Args:
            name: 要注销的插件名称

        Returns:
            True 如果确实移除了插件，名称不存在时返回 False
        """
        try:
            removed = self._plugins.pop(name, None)
        except TypeError:
            return False
        if removed is None:
            return False
        logger.debug(f"Unregistered plugin: {name}")
        return True

    def lookup(self, name: str) -> Plugin:
        """查找插件，不存在时抛出 UnknownPlugin。"""
        try:
            return self._plugins[name]
        except (KeyError, TypeError):
            raise UnknownPlugin(name) from None

    def get(self, name: str) -> Plugin | None:
        """获取插件实例（按名称），不存在时返回 None。"""
        return self._plugins.get(name)

    def has(self, name: str) -> bool:
        return name in self._plugins

    @property
    def names(self) -> list[str]:
        """Get list of registered plugin names."""
        return list(self._plugins.keys())

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: str) -> bool:
        return name in self._plugins
