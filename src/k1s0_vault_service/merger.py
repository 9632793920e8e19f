"""リクエストオプションのディープマージ"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """base と override をディープマージして新しい辞書を返す。

    両方の値がマッピングなら再帰的にマージし、それ以外は override の値が優先される。
    ネストしたマッピングはコピーするが、リストなどその他の値は置換のみでコピーしない。
    入力は変更しない。
    """
    result: dict[str, Any] = {
        key: deep_merge(value, {}) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            result[key] = deep_merge(value, {})
        else:
            result[key] = value
    return result
