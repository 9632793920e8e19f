"""Vault 接続設定ファイルの読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import VaultServiceError, VaultServiceErrorCodes
from .merger import deep_merge
from .models import ServiceConfig


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise VaultServiceError(
            code=VaultServiceErrorCodes.CONFIG_READ,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise VaultServiceError(
            code=VaultServiceErrorCodes.CONFIG_PARSE,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_service_config(base_path: Path, env_path: Path | None = None) -> ServiceConfig:
    """設定ファイルの `vault` セクションから ServiceConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在する場合はベースにマージ。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = deep_merge(data, _read_yaml(env_path))
    try:
        return ServiceConfig.model_validate(data.get("vault") or {})
    except ValidationError as e:
        raise VaultServiceError(
            code=VaultServiceErrorCodes.CONFIG_VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
