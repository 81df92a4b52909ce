"""セッション生成に必要な情報をまとめるクレデンシャル。

どのグラント種別が有効かを隠蔽し、呼び出し側には ``retrieve()`` と
``url()`` だけを公開する。
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from forcecreds.credentials.base import Provider
from forcecreds.credentials.models import (
    CodeCredentials,
    PasswordCredentials,
    TokenCredentials,
)
from forcecreds.credentials.providers import (
    AuthorizationCodeProvider,
    PasswordProvider,
    RefreshTokenProvider,
)
from forcecreds.errors import (
    ConfigurationError,
    ErrorCode,
    create_configuration_error,
)

logger = logging.getLogger(__name__)


class Credentials(Provider):
    """単一のプロバイダを保持するクレデンシャル。

    構築後に保持するプロバイダを差し替えることはできない。
    別のグラント種別が必要な場合は新たに構築する。
    """

    __slots__ = ("_provider",)

    def __init__(self, provider: Provider) -> None:
        """カスタムプロバイダからクレデンシャルを構築する。

        Args:
            provider: リクエストボディとURLを供給するプロバイダ。

        Raises:
            ConfigurationError: provider が None または Provider でない場合。
        """

        if provider is None:
            raise ConfigurationError(
                create_configuration_error("プロバイダに None は指定できません")
            )
        if not isinstance(provider, Provider):
            raise ConfigurationError(
                create_configuration_error(
                    f"Provider ではないオブジェクトが指定されました: {type(provider).__name__}",
                    code=ErrorCode.CONFIG_INVALID_VALUE,
                    details={"provider_type": type(provider).__name__},
                )
            )
        object.__setattr__(self, "_provider", provider)
        # カスタムプロバイダの url() は構築時に呼び出さない
        logger.debug("Credentials constructed: provider=%s", type(provider).__name__)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Credentials は変更できません")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Credentials は変更できません")

    def __repr__(self) -> str:
        return f"Credentials(provider={type(self._provider).__name__})"

    @classmethod
    def from_password(cls, creds: PasswordCredentials) -> Credentials:
        """パスワードクレデンシャルを検証して構築する。"""
        return cls(PasswordProvider(creds))

    @classmethod
    def from_token(cls, creds: TokenCredentials) -> Credentials:
        """トークンクレデンシャルを検証して構築する。"""
        return cls(RefreshTokenProvider(creds))

    @classmethod
    def from_code(cls, creds: CodeCredentials) -> Credentials:
        """認可コードクレデンシャルを検証して構築する。"""
        return cls(AuthorizationCodeProvider(creds))

    def retrieve(self) -> BinaryIO:
        """HTTPリクエストボディのストリームを返す。"""
        return self._provider.retrieve()

    def url(self) -> str:
        """セッションエンドポイントのベースURLを返す。"""
        return self._provider.url()


def new_credentials(provider: Provider) -> Credentials:
    """カスタムプロバイダでクレデンシャルを生成する。

    Raises:
        ConfigurationError: provider が None の場合。
    """
    return Credentials(provider)


def new_password_credentials(creds: PasswordCredentials) -> Credentials:
    """パスワードクレデンシャルでクレデンシャルを生成する。

    Raises:
        ValidationError: 必須フィールドが空の場合。
    """
    return Credentials.from_password(creds)


def new_token_credentials(creds: TokenCredentials) -> Credentials:
    """トークンクレデンシャルでクレデンシャルを生成する。

    refresh_token は必須、access_token は任意。

    Raises:
        ValidationError: 必須フィールドが空の場合。
    """
    return Credentials.from_token(creds)


def new_code_credentials(creds: CodeCredentials) -> Credentials:
    """認可コードクレデンシャルでクレデンシャルを生成する。

    Raises:
        ValidationError: 必須フィールドが空の場合。
    """
    return Credentials.from_code(creds)
