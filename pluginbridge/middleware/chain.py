"""中间件链模块。

按注册顺序保存中间件，并为每次发送组合出一条调用管道：

    M1 -> M2 -> ... -> Mn -> terminal(message, context)

组合方式是从右向左折叠：最内层是终端调用（即插件处理器），
每个中间件包裹它右侧已组合好的部分。管道在每次调用时重新构建，
组合开始时对中间件序列取快照，之后追加的中间件只影响后续调用。
"""

from typing import Any, Awaitable, Callable, Iterator

from loguru import logger

from pluginbridge.errors import InvalidArgument
from pluginbridge.middleware.base import FunctionMiddleware, Middleware
from pluginbridge.utils.helpers import resolve

Stage = Callable[[Any, Any], Awaitable[Any]]

_UNSET: Any = object()


class MiddlewareChain:
    """只追加的有序中间件序列。"""

    def __init__(self):
        self._middlewares: list[Middleware] = []

    def append(self, middleware: Middleware | Callable[..., Any]) -> None:
        """追加中间件到链尾。

        Args:
            middleware: Middleware 实例，或签名为 (message, context, call_next) 的函数

        Raises:
            InvalidArgument: 参数既不是 Middleware 也不可调用
        """
        if isinstance(middleware, Middleware):
            self._middlewares.append(middleware)
        elif callable(middleware):
            self._middlewares.append(FunctionMiddleware(middleware))
        else:
            raise InvalidArgument("Middleware must be a function.")
        logger.debug(f"Added middleware #{len(self._middlewares)}: {self._middlewares[-1]!r}")

    def compose(
        self,
        message: Any,
        context: Any,
        terminal: Callable[[Any, Any], Any],
    ) -> Callable[[], Awaitable[Any]]:
        """组合出一条零参数的异步调用管道。

        Args:
            message: 发送的消息
            context: 本次调用的上下文
            terminal: 最内层调用，签名为 (message, context)

        Returns:
            无参异步函数，调用后依次执行各中间件和终端调用
        """
        async def innermost(msg: Any, ctx: Any) -> Any:
            return await resolve(terminal(msg, ctx))

        stage: Stage = innermost
        for middleware in reversed(tuple(self._middlewares)):
            stage = self._wrap(middleware, stage)

        async def pipeline() -> Any:
            return await stage(message, context)

        return pipeline

    @staticmethod
    def _wrap(middleware: Middleware, downstream: Stage) -> Stage:
        async def stage(msg: Any, ctx: Any) -> Any:
            async def call_next(message: Any = _UNSET, context: Any = _UNSET) -> Any:
                return await downstream(
                    msg if message is _UNSET else message,
                    ctx if context is _UNSET else context,
                )

            return await resolve(middleware.process(msg, ctx, call_next))

        return stage

    def __len__(self) -> int:
        return len(self._middlewares)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(tuple(self._middlewares))
