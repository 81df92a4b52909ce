"""
エラー定義

クレデンシャル構築で使用されるエラーコードと例外クラス
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """エラーコード

    カテゴリ別にエラーコードを定義:
    - CONFIG_xxx: 構成エラー
    - VALIDATION_xxx: 入力検証エラー
    """
    # 構成エラー
    CONFIG_PROVIDER_MISSING = "CONFIG_001"
    CONFIG_INVALID_VALUE = "CONFIG_002"

    # 入力検証エラー
    VALIDATION_FIELD_EMPTY = "VALIDATION_001"


@dataclass
class CredentialError:
    """クレデンシャルエラー情報

    Attributes:
        code: エラーコード文字列
        message: エラーメッセージ
        details: 追加のエラー詳細情報
        recoverable: 復旧可能かどうか
    """
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    recoverable: bool = False
    log_level: int = logging.ERROR


class CredentialsException(Exception):
    """クレデンシャル例外クラス

    CredentialErrorをラップする例外クラス
    """

    def __init__(self, error: CredentialError):
        """CredentialsExceptionを初期化

        Args:
            error: CredentialErrorインスタンス
        """
        self.error = error
        self.log_level = error.log_level
        super().__init__(f"[{error.code}] {error.message}")


class ConfigurationError(CredentialsException):
    """構成例外（プロバイダ未指定・未対応のグラント種別など）"""


class ValidationError(CredentialsException):
    """バリデーション例外（必須フィールドが空）"""

    @property
    def field(self) -> Optional[str]:
        """空だったフィールド名"""
        return (self.error.details or {}).get("field")

    @property
    def variant(self) -> Optional[str]:
        """検証対象のクレデンシャル種別"""
        return (self.error.details or {}).get("variant")


def create_configuration_error(
    message: str,
    code: ErrorCode = ErrorCode.CONFIG_PROVIDER_MISSING,
    details: Optional[Dict[str, Any]] = None,
) -> CredentialError:
    """構成エラーを作成

    Args:
        message: エラーメッセージ
        code: エラーコード
        details: 追加詳細

    Returns:
        CredentialError: 構成エラー
    """
    return CredentialError(
        code=code.value,
        message=message,
        details=details,
        recoverable=False,
        log_level=logging.ERROR,
    )


def create_validation_error(variant: str, field: str) -> CredentialError:
    """必須フィールド欠落エラーを作成

    Args:
        variant: クレデンシャル種別（password / token / code）
        field: 空だったフィールド名

    Returns:
        CredentialError: バリデーションエラー
    """
    return CredentialError(
        code=ErrorCode.VALIDATION_FIELD_EMPTY.value,
        message=f"{variant} クレデンシャルの {field} は空にできません",
        details={"variant": variant, "field": field},
        recoverable=False,
        log_level=logging.WARNING,
    )
