"""データモデルのユニットテスト"""

import pytest
from pydantic import ValidationError

from k1s0_vault_service.models import InitArgs, ServiceConfig, UnsealArgs


@pytest.mark.parametrize(
    ("destination", "api_version"),
    [
        ("http://vault:8200", "v1"),
        ("http://vault:8200/", "v1"),
        ("http://vault:8200", "/v1"),
        ("http://vault:8200/", "/v1/"),
    ],
)
def test_base_url_has_single_slash(destination: str, api_version: str) -> None:
    """末尾/先頭のスラッシュに関わらず base_url が一定であること。"""
    config = ServiceConfig(destination=destination, api_version=api_version)
    assert config.base_url == "http://vault:8200/v1"


def test_service_config_defaults() -> None:
    config = ServiceConfig(destination="http://vault:8200")
    assert config.api_version == "v1"
    assert config.timeout_seconds == 10.0


def test_service_config_is_frozen() -> None:
    """生成後に接続先を変更できないこと。"""
    config = ServiceConfig(destination="http://vault:8200")
    with pytest.raises(ValidationError):
        config.destination = "http://other:8200"  # type: ignore[misc]


def test_service_config_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        ServiceConfig(destination="http://vault:8200", timeout_seconds=0)


def test_init_args_to_dict() -> None:
    args = InitArgs(secret_shares=5, secret_threshold=3)
    assert args.to_dict() == {"secret_shares": 5, "secret_threshold": 3}


def test_init_args_with_pgp_keys() -> None:
    args = InitArgs(secret_shares=2, secret_threshold=1, pgp_keys=["k1", "k2"])
    assert args.to_dict()["pgp_keys"] == ["k1", "k2"]


def test_init_args_threshold_exceeds_shares() -> None:
    with pytest.raises(ValueError):
        InitArgs(secret_shares=2, secret_threshold=3)


def test_init_args_zero_shares() -> None:
    with pytest.raises(ValueError):
        InitArgs(secret_shares=0, secret_threshold=0)


def test_unseal_args_to_dict() -> None:
    assert UnsealArgs(key="abc").to_dict() == {"key": "abc"}
    assert UnsealArgs(key="abc", reset=True).to_dict() == {"key": "abc", "reset": True}


def test_unseal_args_repr_hides_key() -> None:
    """repr にキーシェアが出ないこと。"""
    assert "abc" not in repr(UnsealArgs(key="abc"))
