"""deep_merge ユーティリティのユニットテスト"""

from k1s0_vault_service.merger import deep_merge


def test_merge_simple_override() -> None:
    """シンプルなキーの上書き。"""
    base = {"a": 1, "b": 2}
    override = {"b": 99, "c": 3}
    result = deep_merge(base, override)
    assert result == {"a": 1, "b": 99, "c": 3}


def test_merge_nested_headers_combine() -> None:
    """ネストされたヘッダーは置換ではなく結合されること。"""
    base = {"method": "GET", "headers": {"X-Vault-Token": "t"}}
    override = {"headers": {"X-B3-TraceId": "abc"}, "timeout": 3.0}
    result = deep_merge(base, override)
    assert result == {
        "method": "GET",
        "headers": {"X-Vault-Token": "t", "X-B3-TraceId": "abc"},
        "timeout": 3.0,
    }


def test_merge_override_scalar_wins_over_nested() -> None:
    """base 側がネスト構造でも override のスカラー値が優先されること。"""
    base = {"headers": {"X-Vault-Token": "t"}}
    result = deep_merge(base, {"headers": None})
    assert result["headers"] is None


def test_merge_list_replacement() -> None:
    """リストは置換されること。"""
    base = {"keys": ["a", "b"]}
    override = {"keys": ["c"]}
    result = deep_merge(base, override)
    assert result["keys"] == ["c"]


def test_merge_does_not_mutate_inputs() -> None:
    """base と override が変更されないこと。"""
    base = {"a": {"b": 1}}
    override = {"a": {"c": 2}}
    deep_merge(base, override)
    assert base == {"a": {"b": 1}}
    assert override == {"a": {"c": 2}}


def test_merge_empty_override() -> None:
    """空の override は base と等しい結果を返すこと。"""
    base = {"a": 1, "headers": {"x": "y"}}
    assert deep_merge(base, {}) == base


def test_merge_with_itself() -> None:
    """自分自身とのマージは元と等しいこと。"""
    base = {"a": 1, "headers": {"x": "y", "nested": {"z": [1, 2]}}}
    assert deep_merge(base, base) == base


def test_merge_passes_through_unknown_shapes() -> None:
    """形状を検証せずそのまま通すこと。"""
    base = {"json": {"k": "v"}}
    result = deep_merge(base, {"json": "raw"})
    assert result == {"json": "raw"}


def test_merge_result_does_not_share_nested_mappings() -> None:
    """結果のネストした辞書を変更しても入力に影響しないこと。"""
    base = {"headers": {"X-Request-Id": "r-1"}, "params": {"a": "1"}}
    override = {"extensions": {"trace": "t"}}
    result = deep_merge(base, override)
    result["headers"]["X-Request-Id"] = "changed"
    result["extensions"]["trace"] = "changed"
    assert base["headers"] == {"X-Request-Id": "r-1"}
    assert override["extensions"] == {"trace": "t"}
