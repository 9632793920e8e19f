"""vault_service ライブラリの例外型定義"""

from __future__ import annotations


class VaultServiceError(Exception):
    """vault_service ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause


class ProtocolError(VaultServiceError):
    """Vault のレスポンスが成功として扱えない（成功以外のステータス、解釈できない本文）。"""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
    ) -> None:
        super().__init__(code=code or VaultServiceErrorCodes.PROTOCOL_ERROR, message=message)
        self.status_code = status_code


class TransportError(VaultServiceError):
    """HTTP 交換自体が完了しなかった（接続失敗・タイムアウト等）。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(
            code=VaultServiceErrorCodes.TRANSPORT_ERROR,
            message=message,
            cause=cause,
        )


class VaultServiceErrorCodes:
    """VaultServiceError のエラーコード定数。"""

    PROTOCOL_ERROR: str = "PROTOCOL_ERROR"
    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    DECODE_ERROR: str = "DECODE_ERROR"
    INVALID_HEADER: str = "INVALID_HEADER"
    CONFIG_READ: str = "CONFIG_READ_ERROR"
    CONFIG_PARSE: str = "CONFIG_PARSE_ERROR"
    CONFIG_VALIDATION: str = "CONFIG_VALIDATION_ERROR"
