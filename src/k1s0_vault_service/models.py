"""Vault サービスのデータモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field

# httpx.AsyncClient.request のキーワード引数（headers, params, timeout など）
RequestOptions = dict[str, Any]


class ServiceConfig(BaseModel):
    """Vault サービスの接続先設定。クライアント生成後は変更不可。"""

    model_config = ConfigDict(frozen=True)

    destination: str
    api_version: str = "v1"
    timeout_seconds: float = Field(default=10.0, gt=0)

    @property
    def base_url(self) -> str:
        """`destination/api_version` を余分なスラッシュなしで返す。"""
        return f"{self.destination.rstrip('/')}/{self.api_version.strip('/')}"


@dataclass
class InitArgs:
    """sys/init リクエスト。"""

    secret_shares: int
    secret_threshold: int
    pgp_keys: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.secret_shares < 1 or self.secret_threshold < 1:
            raise ValueError("secret_shares and secret_threshold must be >= 1")
        if self.secret_threshold > self.secret_shares:
            raise ValueError("secret_threshold must not exceed secret_shares")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "secret_shares": self.secret_shares,
            "secret_threshold": self.secret_threshold,
        }
        if self.pgp_keys:
            data["pgp_keys"] = list(self.pgp_keys)
        return data


@dataclass
class UnsealArgs:
    """sys/unseal リクエスト。キーシェアを 1 つだけ運ぶ。"""

    key: str
    reset: bool = False

    def __repr__(self) -> str:
        return f"UnsealArgs(key='***', reset={self.reset})"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key": self.key}
        if self.reset:
            data["reset"] = True
        return data


class StatusResult(TypedDict):
    """sys/init GET のレスポンス。"""

    initialized: bool


class InitResult(TypedDict, total=False):
    """sys/init PUT のレスポンス。root_token と keys は機密情報。"""

    keys: list[str]
    keys_base64: list[str]
    root_token: str


class SealStatus(TypedDict, total=False):
    """sys/seal-status のレスポンス。"""

    type: str
    sealed: bool
    t: int
    n: int
    progress: int
    nonce: str
    version: str
    cluster_name: str
    cluster_id: str


UnsealResult = SealStatus
ReadResult = dict[str, Any]
ListResult = dict[str, Any]
