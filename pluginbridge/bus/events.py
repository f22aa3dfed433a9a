"""插件桥事件名称定义。

桥在生命周期中发出以下事件，载荷均为普通字典：
- plugin:registered: 插件注册成功，载荷 {"name"}
- plugin:unregistered: 插件被移除，载荷 {"name"}
- plugin:message: 一次发送成功完成，载荷 {"name", "message", "response"}
"""

PLUGIN_REGISTERED = "plugin:registered"
PLUGIN_UNREGISTERED = "plugin:unregistered"
PLUGIN_MESSAGE = "plugin:message"
