"""
Shopify Admin API client configuration

Stores shop credentials, builds the GraphQL and REST base URLs, and tracks
which Admin API versions are still supported.
"""

__version__ = "0.1.0"

from .client import EmptyApiKeyError, LEGACY_URL_VERSION, Shopify, ShopifyConfigError
from .models import ShopifySettings
from .versions import (
    ApiVersion,
    UnknownApiVersionError,
    VersionMetadata,
    api_version_to_string,
    get_end_of_support_date,
    get_version_metadata,
    is_deprecated,
    latest_stable_version,
    parse_api_version,
    supported_versions,
)

__all__ = [
    "ApiVersion",
    "EmptyApiKeyError",
    "LEGACY_URL_VERSION",
    "Shopify",
    "ShopifyConfigError",
    "ShopifySettings",
    "UnknownApiVersionError",
    "VersionMetadata",
    "api_version_to_string",
    "get_end_of_support_date",
    "get_version_metadata",
    "is_deprecated",
    "latest_stable_version",
    "parse_api_version",
    "supported_versions",
]
