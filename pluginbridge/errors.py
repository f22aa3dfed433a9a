"""插件桥异常定义。

所有由插件桥自身抛出的异常都继承自 BridgeError：
- InvalidArgument: 名称、处理器或中间件参数不合法
- DuplicatePlugin: 插件名称已被注册
- UnknownPlugin: 发送目标未注册

插件处理器和中间件在执行时抛出的异常不做包装，原样传播。
"""


class BridgeError(Exception):
    """插件桥异常基类。"""


class InvalidArgument(BridgeError, ValueError):
    """参数不满足前置条件（空名称、不可调用的处理器等）。"""


class DuplicatePlugin(BridgeError):
    """注册时名称已存在。

    Attributes:
        name: 冲突的插件名称
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Plugin '{name}' is already registered.")


class UnknownPlugin(BridgeError, LookupError):
    """发送目标没有已注册的处理器。

    Attributes:
        name: 未找到的插件名称
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Plugin '{name}' is not registered.")
