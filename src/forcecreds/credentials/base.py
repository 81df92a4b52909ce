"""クレデンシャルプロバイダ基盤。

トークンエンドポイントへ送るリクエストボディと送信先URLを
供給するプロバイダが共通で実装すべきインターフェースを定義する。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import BinaryIO


class _GrantType(str, Enum):
    PASSWORD = "password"
    # 最初のリフレッシュトークンを取得する
    AUTHORIZATION_CODE = "authorization_code"
    # 期限切れのアクセストークンを更新する
    REFRESH_TOKEN = "refresh_token"


class Provider(ABC):
    """クレデンシャルプロバイダの抽象基底クラス。

    セッション生成側に対し、リクエストボディと送信先URLを提供する。
    """

    @abstractmethod
    def retrieve(self) -> BinaryIO:
        """フォームエンコード済みのリクエストボディを返す。

        呼び出しごとに新しいストリームを返す。ボディ生成で失敗する
        プロバイダは CredentialsException を送出してよい。
        """

    @abstractmethod
    def url(self) -> str:
        """セッションエンドポイントのベースURLを返す。"""
