"""Vault HTTP API クライアント実装"""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx
import structlog

from .client import VaultService
from .exceptions import ProtocolError, TransportError, VaultServiceErrorCodes
from .headers import VaultHeader, build_headers
from .merger import deep_merge
from .models import (
    InitArgs,
    InitResult,
    ListResult,
    ReadResult,
    RequestOptions,
    SealStatus,
    ServiceConfig,
    StatusResult,
    UnsealArgs,
    UnsealResult,
)

logger = structlog.stdlib.get_logger(__name__)

# データを返す操作は 200 のみ、確認系の操作は本文なしの 204 も成功とする
DATA_STATUS_CODES: frozenset[int] = frozenset({200})
CONFIRM_STATUS_CODES: frozenset[int] = frozenset({200, 204})

_NO_BODY = object()
_UNDECODABLE = object()


def _decode_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return _UNDECODABLE


def _error_message(status_code: int, body: Any) -> str:
    """レスポンスの errors 配列の先頭、なければ汎用メッセージを返す。"""
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return str(errors[0])
    return f"Status {status_code}"


class HttpVaultService(VaultService):
    """httpx を使った Vault HTTP API クライアント。

    http_client を渡した場合はそれを使い回し、渡さない場合は呼び出しごとに
    AsyncClient を生成する。async with で使うとクライアントを 1 つだけ生成して共有する。
    """

    def __init__(
        self,
        config: ServiceConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._dest = config.base_url
        self._http_client = http_client
        self._owns_client = False

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._dest

    async def __aenter__(self) -> HttpVaultService:
        if self._http_client is None:
            self._http_client = self._make_client()
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_client = False

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._config.timeout_seconds)

    def _build_request(
        self,
        method: str,
        path: str,
        token: str,
        body: Any,
        options: RequestOptions | None,
    ) -> dict[str, Any]:
        # method/url/json/トークンは呼び出し側オプションより優先する
        request = deep_merge(
            options or {},
            {"method": method, "url": f"{self._dest}/{path.lstrip('/')}"},
        )
        if body is not _NO_BODY:
            request["json"] = body
        # ヘッダー名は大文字小文字を区別しないため httpx.Headers で上書きする
        headers = httpx.Headers(request.get("headers"))
        headers.update(build_headers({VaultHeader.TOKEN: token}))
        request["headers"] = headers
        return request

    async def _send(self, request: dict[str, Any]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(**request)
        async with self._make_client() as client:
            return await client.request(**request)

    async def _fetch(
        self,
        method: str,
        path: str,
        *,
        token: str = "",
        body: Any = _NO_BODY,
        options: RequestOptions | None = None,
        success: frozenset[int] = DATA_STATUS_CODES,
    ) -> Any:
        request = self._build_request(method, path, token, body, options)
        try:
            resp = await self._send(request)
        except httpx.HTTPError as e:
            logger.warning("vault request failed", method=method, path=path, error=type(e).__name__)
            raise TransportError(
                message=f"{method} {path}: {e}",
                cause=e,
            ) from e

        logger.debug("vault response", method=method, path=path, status_code=resp.status_code)
        body_data = _decode_body(resp)
        if resp.status_code not in success:
            raise ProtocolError(resp.status_code, _error_message(resp.status_code, body_data))
        if body_data is _UNDECODABLE:
            raise ProtocolError(
                resp.status_code,
                f"{method} {path}: response body is not valid JSON",
                code=VaultServiceErrorCodes.DECODE_ERROR,
            )
        return body_data

    async def status(self, options: RequestOptions | None = None) -> StatusResult:
        return await self._fetch("GET", "sys/init", options=options)

    async def init(self, args: InitArgs, options: RequestOptions | None = None) -> InitResult:
        return await self._fetch("PUT", "sys/init", body=args.to_dict(), options=options)

    async def seal_status(self, options: RequestOptions | None = None) -> SealStatus:
        return await self._fetch("GET", "sys/seal-status", options=options)

    async def seal(self, token: str, options: RequestOptions | None = None) -> None:
        await self._fetch(
            "PUT", "sys/seal", token=token, options=options, success=CONFIRM_STATUS_CODES
        )

    async def unseal(
        self, args: UnsealArgs, options: RequestOptions | None = None
    ) -> UnsealResult | None:
        return await self._fetch(
            "PUT",
            "sys/unseal",
            body=args.to_dict(),
            options=options,
            success=CONFIRM_STATUS_CODES,
        )

    async def read(
        self, path: str, token: str, options: RequestOptions | None = None
    ) -> ReadResult:
        return await self._fetch("GET", path, token=token, options=options)

    async def list(self, token: str, options: RequestOptions | None = None) -> ListResult:
        return await self._fetch("GET", "secret?list=true", token=token, options=options)

    async def write(
        self, path: str, value: Any, token: str, options: RequestOptions | None = None
    ) -> None:
        await self._fetch(
            "POST", path, token=token, body=value, options=options, success=CONFIRM_STATUS_CODES
        )
