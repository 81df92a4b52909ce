"""設定管理 - クレデンシャル設定の読み込み"""

from forcecreds.config.settings import CredentialSettings, load_settings

__all__ = [
    "CredentialSettings",
    "load_settings",
]
