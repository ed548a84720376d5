"""Pydantic settings for Shopify credentials."""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .versions import ApiVersion, parse_api_version


class ShopifySettings(BaseSettings):
    """Shopify configuration loaded from environment variables."""

    shop: str = Field(..., description="Shop domain, e.g. my-shop.myshopify.com")
    api_key: str = Field(..., description="Admin API key or access token")
    shared_secret: Optional[str] = Field(default=None, description="App shared secret")
    api_version: ApiVersion = Field(default=ApiVersion.V2023_01, description="Admin API version to target")

    model_config = {
        "env_prefix": "SHOPIFY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("api_version", mode="before")
    @classmethod
    def _parse_version(cls, value):
        return parse_api_version(value)


def mask_secret(value: Optional[str]) -> str:
    """Mask a credential for display (show first 4 and last 4 chars)."""
    if value is None:
        return "None"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"
