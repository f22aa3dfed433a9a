"""pluginbridge：连接宿主应用与插件的进程内消息总线。"""

from pluginbridge.bus import PLUGIN_MESSAGE, PLUGIN_REGISTERED, PLUGIN_UNREGISTERED, PluginBridge
from pluginbridge.errors import BridgeError, DuplicatePlugin, InvalidArgument, UnknownPlugin
from pluginbridge.middleware import Middleware
from pluginbridge.plugins import Plugin

__version__ = "0.1.0"

__all__ = [
    "PluginBridge",
    "Plugin",
    "Middleware",
    "BridgeError",
    "InvalidArgument",
    "DuplicatePlugin",
    "UnknownPlugin",
    "PLUGIN_REGISTERED",
    "PLUGIN_UNREGISTERED",
    "PLUGIN_MESSAGE",
]
