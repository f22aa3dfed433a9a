"""事件发射器模块。

按事件名称管理监听器集合：
- subscribe/unsubscribe: 添加或移除监听器（按对象身份去重）
- emit: 同步依次调用监听器，单个监听器失败只记录不传播

监听器以身份键保存，不要求可哈希，也不使用 __eq__ 比较；
绑定方法按 (实例, 函数) 的身份识别，因此 off(obj.method) 能移除 on(obj.method)。
集合保持插入顺序；发射开始时取快照，发射过程中增删监听器不影响本次发射。
"""

import inspect
from typing import Any, Callable, Protocol

Listener = Callable[[Any], Any]


class DiagnosticSink(Protocol):
    """诊断输出：至少提供 error 方法（loguru logger、logging.Logger 均满足）。"""

    def error(self, message: str) -> Any: ...


def _identity(listener: Listener) -> tuple[int, ...]:
    # 每次访问 obj.method 都会生成新的绑定方法对象
    if inspect.ismethod(listener):
        return (id(listener.__self__), id(listener.__func__))
    return (id(listener),)


class EventEmitter:
    """事件名称 -> 监听器集合。

    监听器必须是同步的：发射不会等待协程，返回可等待对象的监听器
    会被报告到诊断输出，其函数体不会执行。

    Attributes:
        sink: 监听器失败时的诊断输出
    """

    def __init__(self, sink: DiagnosticSink):
        self.sink = sink
        # 值持有监听器本身，保证身份键在订阅期间不被复用
        self._listeners: dict[str, dict[tuple[int, ...], Listener]] = {}

    def subscribe(self, event: str, listener: Listener) -> None:
        """订阅事件。重复订阅同一监听器不会产生多次调用。"""
        self._listeners.setdefault(event, {}).setdefault(_identity(listener), listener)

    def unsubscribe(self, event: str, listener: Listener) -> None:
        """取消订阅。监听器不存在时为空操作。"""
        listeners = self._listeners.get(event)
        if listeners is not None:
            listeners.pop(_identity(listener), None)

    def emit(self, event: str, payload: Any) -> None:
        """同步通知 event 的所有监听器。

        Args:
            event: 事件名称
            payload: 传给每个监听器的载荷
        """
        listeners = self._listeners.get(event)
        if not listeners:
            return

        for listener in list(listeners.values()):
            try:
                result = listener(payload)
            except Exception as e:
                self.sink.error(f"Listener error for event '{event}': {e}")
                continue
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                self.sink.error(
                    f"Listener for event '{event}' returned an awaitable; "
                    "listeners must be synchronous and it was discarded"
                )

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))
