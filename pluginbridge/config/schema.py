"""配置模式模块。

使用 Pydantic 定义插件桥的配置结构，支持：
- 类型验证
- 环境变量加载
- 默认值
- 嵌套配置

环境变量格式：
- 顶层: PLUGINBRIDGE_KEY=value
- 嵌套: PLUGINBRIDGE_SECTION__KEY=value

示例：
    PLUGINBRIDGE_LOGGING__LEVEL=DEBUG
    PLUGINBRIDGE_LOGGING__SINK=~/.pluginbridge/bridge.log
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


class LoggingConfig(BaseModel):
    """日志配置。

    Attributes:
        enabled: 是否输出 pluginbridge 命名空间下的日志
        level: 最低日志级别
        sink: 输出目标，"stderr" 或文件路径
        format: loguru 格式字符串
    """
    enabled: bool = True
    level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    sink: str = "stderr"
    format: str = DEFAULT_FORMAT

    @property
    def sink_path(self) -> Path | None:
        """文件输出路径；输出到 stderr 时返回 None。"""
        if self.sink == "stderr":
            return None
        return Path(self.sink).expanduser()


class BridgeConfig(BaseSettings):
    """插件桥根配置。

    支持从环境变量加载配置，前缀为 PLUGINBRIDGE_。
    嵌套配置使用 __ 分隔，如 PLUGINBRIDGE_LOGGING__LEVEL。

    Attributes:
        logging: 日志配置
    """
    model_config = SettingsConfigDict(
        env_prefix="PLUGINBRIDGE_",  # 环境变量前缀
        env_nested_delimiter="__",  # 嵌套分隔符
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
