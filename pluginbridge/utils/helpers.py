"""通用辅助函数。"""

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """统一等待结果：可等待对象则 await，否则原样返回。

    处理器和中间件既可以是同步函数也可以是异步函数，
    调用方通过此函数以相同方式获取最终结果。
    """
    if inspect.isawaitable(value):
        return await value
    return value


def is_valid_name(name: Any) -> bool:
    """插件名称必须是非空字符串。"""
    return isinstance(name, str) and bool(name)
