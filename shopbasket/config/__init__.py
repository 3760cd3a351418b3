from shopbasket.config.settings import KNOWN_DECORATORS, Settings, get_settings

__all__ = ["KNOWN_DECORATORS", "Settings", "get_settings"]
