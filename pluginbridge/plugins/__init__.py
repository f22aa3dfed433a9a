"""插件模块。

- Plugin: 插件抽象基类
- FunctionPlugin: 普通函数的插件包装
- PluginRegistry: 插件注册中心
"""

from pluginbridge.plugins.base import FunctionPlugin, Plugin
from pluginbridge.plugins.registry import PluginRegistry

__all__ = ["Plugin", "FunctionPlugin", "PluginRegistry"]
