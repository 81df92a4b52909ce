"""
forcecreds - OAuth2 トークン要求のクレデンシャル構築

パスワード・リフレッシュトークン・認可コードの各グラントから、
送信先URLとフォームエンコード済みのリクエストボディを生成する。
"""

__version__ = "0.1.0"

from forcecreds.credentials import (
    AuthorizationCodeProvider,
    CodeCredentials,
    Credentials,
    PasswordCredentials,
    PasswordProvider,
    Provider,
    RefreshTokenProvider,
    TokenCredentials,
    get_credentials,
    new_code_credentials,
    new_credentials,
    new_password_credentials,
    new_token_credentials,
)
from forcecreds.errors import (
    ConfigurationError,
    CredentialError,
    CredentialsException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "AuthorizationCodeProvider",
    "CodeCredentials",
    "ConfigurationError",
    "CredentialError",
    "Credentials",
    "CredentialsException",
    "ErrorCode",
    "PasswordCredentials",
    "PasswordProvider",
    "Provider",
    "RefreshTokenProvider",
    "TokenCredentials",
    "ValidationError",
    "get_credentials",
    "new_code_credentials",
    "new_credentials",
    "new_password_credentials",
    "new_token_credentials",
]
