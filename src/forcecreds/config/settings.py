"""Pydantic V2 ベースのクレデンシャル設定モデル"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forcecreds.credentials import Credentials, get_credentials, mask_secret

logger = logging.getLogger(__name__)

# グラント種別ごとに渡すフィールド
GRANT_FIELDS: Dict[str, Tuple[str, ...]] = {
    "password": ("url", "username", "password", "client_id", "client_secret"),
    "refresh_token": ("url", "access_token", "refresh_token", "client_id", "client_secret"),
    "authorization_code": ("url", "code", "redirect_uri", "client_id", "client_secret"),
}
GRANT_ALIASES = {
    "refresh": "refresh_token",
    "token": "refresh_token",
    "code": "authorization_code",
}
SECRET_FIELDS = ("password", "access_token", "refresh_token", "code", "client_secret")


class CredentialSettings(BaseSettings):
    """クレデンシャルの構築に必要な設定"""

    model_config = SettingsConfigDict(
        env_prefix="FORCECREDS_",
        env_file=".env",
        extra="forbid",
    )

    grant_type: str = Field(default="password")
    url: str = ""
    username: str = ""
    password: str = ""
    access_token: str = ""
    refresh_token: str = ""
    code: str = ""
    redirect_uri: str = ""
    client_id: str = ""
    client_secret: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ) -> Tuple[Any, ...]:
        """設定ソースの優先順位をカスタマイズ（env > dotenv > init）"""
        return (
            env_settings,
            dotenv_settings,
            init_settings,
            file_secret_settings,
        )

    @field_validator("grant_type")
    @classmethod
    def normalize_grant_type(cls, value: str) -> str:
        """グラント種別を正規化し、未対応の値を拒否する"""
        normalized = value.strip().lower()
        normalized = GRANT_ALIASES.get(normalized, normalized)
        if normalized not in GRANT_FIELDS:
            raise ValueError(
                f"grant_type must be one of {', '.join(GRANT_FIELDS)}, got: {value}"
            )
        return normalized

    def build_credentials(self) -> Credentials:
        """設定済みのグラント種別でクレデンシャルを構築する"""
        fields = {name: getattr(self, name) for name in GRANT_FIELDS[self.grant_type]}
        return get_credentials(self.grant_type, **fields)

    def dump_masked(self) -> dict:
        """機微情報をマスクした設定を返却する"""
        data = self.model_dump()
        for name in SECRET_FIELDS:
            if data.get(name):
                data[name] = mask_secret(data[name])
        return data


def load_settings(config_path: Optional[Path] = None) -> CredentialSettings:
    """設定ファイルと環境変数から設定を読み込む

    Args:
        config_path: 設定ファイルのパス（省略時はデフォルトパスを検索）

    Returns:
        CredentialSettings: 読み込んだ設定（環境変数がファイルの値を上書きする）
    """
    return CredentialSettings(**_load_from_file(config_path))


def _load_from_file(config_path: Optional[Path]) -> Dict[str, Any]:
    """設定ファイルから読み込む"""
    resolved_path = config_path or _find_default_config()
    if resolved_path is None or not resolved_path.exists():
        return {}

    try:
        with resolved_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.error(
            "Failed to load credential config file: path=%s error=%s",
            resolved_path,
            e,
            exc_info=True,
        )
        return {}

    if not isinstance(data, dict):
        logger.error(
            "Invalid credential config structure: expected mapping but got %s at %s",
            type(data).__name__,
            resolved_path,
        )
        return {}

    return {str(key): "" if value is None else str(value) for key, value in data.items()}


def _find_default_config() -> Optional[Path]:
    """デフォルトの設定ファイルパスを探索"""
    paths = [
        Path.cwd() / "forcecreds.yaml",
        Path.cwd() / "forcecreds.yml",
        Path.home() / ".config" / "forcecreds" / "config.yaml",
    ]
    for path in paths:
        if path.exists():
            return path
    return None
