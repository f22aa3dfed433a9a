"""日志初始化模块。

基于 loguru 配置插件桥的日志输出：
- 按配置添加 stderr 或文件输出
- 重复初始化时只替换本模块上次添加的处理器
- 可整体关闭 pluginbridge 命名空间的日志

loguru 的 logger 是进程全局的，宿主应用自己添加的处理器不会被移除。
"""

import sys

from loguru import logger

from pluginbridge.config.schema import LoggingConfig

# 本模块添加的处理器 ID
_handler_id: int | None = None


def setup_logging(config: LoggingConfig) -> int | None:
    """按配置初始化 loguru。

    Args:
        config: 日志配置

    Returns:
        新添加的处理器 ID；日志被关闭时返回 None
    """
    global _handler_id

    _remove_own_handler()
    if not config.enabled:
        logger.disable("pluginbridge")
        return None

    logger.enable("pluginbridge")
    path = config.sink_path
    if path is None:
        _handler_id = logger.add(sys.stderr, level=config.level, format=config.format)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        _handler_id = logger.add(path, level=config.level, format=config.format, encoding="utf-8")
    return _handler_id


def _remove_own_handler() -> None:
    global _handler_id

    if _handler_id is None:
        return
    try:
        logger.remove(_handler_id)
    except ValueError:
        # 宿主已经自行移除了该处理器
        pass
    _handler_id = None
