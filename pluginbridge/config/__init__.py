"""配置模块。"""

from pluginbridge.config.schema import BridgeConfig, LoggingConfig

__all__ = ["BridgeConfig", "LoggingConfig"]
