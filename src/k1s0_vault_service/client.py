"""VaultService 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .models import (
    InitArgs,
    InitResult,
    ListResult,
    ReadResult,
    RequestOptions,
    SealStatus,
    StatusResult,
    UnsealArgs,
    UnsealResult,
)


class VaultService(ABC):
    """Vault のシール管理とシークレット操作を行うクライアント抽象基底クラス。

    各操作は単発のリクエスト/レスポンスで、リトライもシール状態の追跡も行わない。
    操作順序（init → unseal → read/write）の強制はサーバー側の責務。
    """

    @abstractmethod
    async def status(self, options: RequestOptions | None = None) -> StatusResult:
        """初期化済みかどうかを取得する。"""
        ...

    @abstractmethod
    async def init(self, args: InitArgs, options: RequestOptions | None = None) -> InitResult:
        """キーシェア数と閾値を指定して初期化する。"""
        ...

    @abstractmethod
    async def seal_status(self, options: RequestOptions | None = None) -> SealStatus:
        """シール状態を取得する。"""
        ...

    @abstractmethod
    async def seal(self, token: str, options: RequestOptions | None = None) -> None:
        """シールする。"""
        ...

    @abstractmethod
    async def unseal(
        self, args: UnsealArgs, options: RequestOptions | None = None
    ) -> UnsealResult | None:
        """キーシェアを 1 つ提出する。閾値に達するまで呼び出し側が繰り返す。"""
        ...

    @abstractmethod
    async def read(
        self, path: str, token: str, options: RequestOptions | None = None
    ) -> ReadResult:
        """シークレットを読み出す。"""
        ...

    @abstractmethod
    async def list(self, token: str, options: RequestOptions | None = None) -> ListResult:
        """シークレットの一覧を取得する。"""
        ...

    @abstractmethod
    async def write(
        self, path: str, value: Any, token: str, options: RequestOptions | None = None
    ) -> None:
        """シークレットを書き込む。"""
        ...
