"""消息总线模块。

用于解耦宿主应用与插件之间的通信。
宿主通过 PluginBridge 发送或广播消息，插件处理后返回响应，
观察者通过事件订阅感知插件注册、注销和消息完成。
"""

from pluginbridge.bus.bridge import PluginBridge
from pluginbridge.bus.emitter import EventEmitter
from pluginbridge.bus.events import PLUGIN_MESSAGE, PLUGIN_REGISTERED, PLUGIN_UNREGISTERED

__all__ = [
    "PluginBridge",
    "EventEmitter",
    "PLUGIN_REGISTERED",
    "PLUGIN_UNREGISTERED",
    "PLUGIN_MESSAGE",
]
