"""中间件基类模块。

中间件拦截每一次发送，签名为 (message, context, call_next)：
- 调用 call_next() 继续执行后续中间件和插件，可对结果做后处理
- 不调用 call_next() 直接返回，即短路整条链
- call_next(message=..., context=...) 可替换后续阶段看到的消息或上下文
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from pluginbridge.utils.helpers import resolve

# call_next 的类型：可选地接受替换的 message/context
Next = Callable[..., Awaitable[Any]]


class Middleware(ABC):
    """中间件抽象基类。

    使用示例：
        class TimingMiddleware(Middleware):
            async def process(self, message, context, call_next):
                started = time.monotonic()
                response = await call_next()
                context["elapsed"] = time.monotonic() - started
                return response
    """

    @abstractmethod
    async def process(self, message: Any, context: Any, call_next: Next) -> Any:
        """拦截一次发送。

        Args:
            message: 当前阶段看到的消息
            context: 当前阶段看到的上下文
            call_next: 调用链中剩余部分的续延

        Returns:
            本阶段的结果，作为上一阶段 call_next() 的返回值
        """
        pass


class FunctionMiddleware(Middleware):
    """将普通函数（同步或异步）包装为中间件。"""

    def __init__(self, func: Callable[..., Any]):
        self.func = func

    async def process(self, message: Any, context: Any, call_next: Next) -> Any:
        return await resolve(self.func(message, context, call_next))

    def __repr__(self) -> str:
        return f"FunctionMiddleware({getattr(self.func, '__qualname__', self.func)!r})"
