import pytest
from pydantic import ValidationError

from shopify_api.models import ShopifySettings, mask_secret
from shopify_api.versions import ApiVersion


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("SHOPIFY_SHOP", "SHOPIFY_API_KEY", "SHOPIFY_SHARED_SECRET", "SHOPIFY_API_VERSION"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_from_environment(clean_env) -> None:
    clean_env.setenv("SHOPIFY_SHOP", "my-shop.myshopify.com")
    clean_env.setenv("SHOPIFY_API_KEY", "key")
    clean_env.setenv("SHOPIFY_API_VERSION", "2022-10")

    settings = ShopifySettings(_env_file=None)

    assert settings.shop == "my-shop.myshopify.com"
    assert settings.api_key == "key"
    assert settings.shared_secret is None
    assert settings.api_version is ApiVersion.V2022_10


def test_settings_default_version(clean_env) -> None:
    clean_env.setenv("SHOPIFY_SHOP", "my-shop")
    clean_env.setenv("SHOPIFY_API_KEY", "key")

    assert ShopifySettings(_env_file=None).api_version is ApiVersion.V2023_01


def test_settings_read_env_file(clean_env, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "SHOPIFY_SHOP=file-shop\nSHOPIFY_API_KEY=file-key\nSHOPIFY_SHARED_SECRET=file-secret\n",
        encoding="utf-8",
    )

    settings = ShopifySettings(_env_file=env_file)

    assert settings.shop == "file-shop"
    assert settings.shared_secret == "file-secret"


def test_settings_require_shop_and_key(clean_env) -> None:
    with pytest.raises(ValidationError):
        ShopifySettings(_env_file=None)


def test_settings_reject_unknown_version(clean_env) -> None:
    with pytest.raises(ValidationError, match="Unknown API version"):
        ShopifySettings(shop="s", api_key="k", api_version="2019-01", _env_file=None)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "None"),
        ("", ""),
        ("abcd", "****"),
        ("12345678", "********"),
        ("shpat_abcdef123456", "shpa...3456"),
    ],
)
def test_mask_secret(value, expected) -> None:
    assert mask_secret(value) == expected
