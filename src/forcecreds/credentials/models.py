"""クレデンシャルの値オブジェクト。"""

from __future__ import annotations

from dataclasses import dataclass


def mask_secret(value: str) -> str:
    """鍵やトークンをマスクしてログ出力を避ける"""
    if not value:
        return "***"
    if len(value) <= 4:
        return "*" * len(value)
    return f"***{value[-4:]}"


@dataclass(frozen=True, slots=True)
class PasswordCredentials:
    """リソースオーナーパスワードグラント用のクレデンシャル。

    Attributes:
        url: ログインURL（例: https://login.salesforce.com, https://test.salesforce.com）
        username: ログインするユーザー名
        password: ユーザーのパスワード
        client_id: 接続アプリケーションのクライアントID
        client_secret: 接続アプリケーションのクライアントシークレット
    """

    url: str = ""
    username: str = ""
    password: str = ""
    client_id: str = ""
    client_secret: str = ""

    def __repr__(self) -> str:
        return (
            f"PasswordCredentials(url={self.url!r}, username={self.username!r}, "
            f"password={mask_secret(self.password)}, client_id={self.client_id!r}, "
            f"client_secret={mask_secret(self.client_secret)})"
        )


@dataclass(frozen=True, slots=True)
class TokenCredentials:
    """リフレッシュトークングラント用のクレデンシャル。

    access_token は呼び出し側の便宜のために保持するだけで、
    検証にもリクエストボディにも使われない。
    """

    url: str = ""
    access_token: str = ""
    refresh_token: str = ""
    client_id: str = ""
    client_secret: str = ""

    def __repr__(self) -> str:
        return (
            f"TokenCredentials(url={self.url!r}, "
            f"access_token={mask_secret(self.access_token)}, "
            f"refresh_token={mask_secret(self.refresh_token)}, "
            f"client_id={self.client_id!r}, client_secret={mask_secret(self.client_secret)})"
        )


@dataclass(frozen=True, slots=True)
class CodeCredentials:
    """認可コードグラント用のクレデンシャル。"""

    url: str = ""
    code: str = ""
    redirect_uri: str = ""
    client_id: str = ""
    client_secret: str = ""

    def __repr__(self) -> str:
        return (
            f"CodeCredentials(url={self.url!r}, code={mask_secret(self.code)}, "
            f"redirect_uri={self.redirect_uri!r}, client_id={self.client_id!r}, "
            f"client_secret={mask_secret(self.client_secret)})"
        )
