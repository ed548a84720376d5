"""Shopify client descriptor: shop credentials and base URLs."""

import logging
from typing import Optional

from .models import ShopifySettings, mask_secret
from .versions import api_version_to_string, is_deprecated


logger = logging.getLogger(__name__)

# URLs are pinned to this release; it is independent of ApiVersion.
LEGACY_URL_VERSION = "2020-04"

QUERY_URL_TEMPLATE = "https://{shop}/admin/api/" + LEGACY_URL_VERSION + "/graphql.json"
REST_URL_TEMPLATE = "https://{shop}/admin/api/" + LEGACY_URL_VERSION + "/"


class ShopifyConfigError(Exception):
    """Base error for Shopify client configuration."""
    pass


class EmptyApiKeyError(ShopifyConfigError, ValueError):
    """API key was empty."""
    pass


class Shopify:
    """Credentials and precomputed base URLs for one Shopify shop."""

    def __init__(self, shop: str, api_key: str, shared_secret: Optional[str] = None):
        """Create a new Shopify client descriptor.

        Args:
            shop: Shop domain, interpolated as-is into the base URLs
            api_key: Admin API key
            shared_secret: Optional app shared secret
        """
        self._shop = shop
        self._api_key = api_key
        self._shared_secret = shared_secret
        self._query_url = QUERY_URL_TEMPLATE.format(shop=shop)
        self._rest_url = REST_URL_TEMPLATE.format(shop=shop)

    @classmethod
    def from_settings(cls, settings: ShopifySettings) -> "Shopify":
        """Build a descriptor from loaded settings."""
        if is_deprecated(settings.api_version):
            logger.warning(
                "Configured Shopify API version %s is past its end of support",
                api_version_to_string(settings.api_version),
            )
        return cls(settings.shop, settings.api_key, settings.shared_secret)

    @property
    def shop(self) -> str:
        return self._shop

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def shared_secret(self) -> Optional[str]:
        return self._shared_secret

    @property
    def query_url(self) -> str:
        """GraphQL endpoint."""
        return self._query_url

    @property
    def rest_url(self) -> str:
        """REST root, ending with a slash."""
        return self._rest_url

    def get_shop(self) -> str:
        """Get the shop name."""
        return self._shop

    def get_api_key(self) -> str:
        return self._api_key

    def get_shared_secret(self) -> Optional[str]:
        return self._shared_secret

    def get_query_url(self) -> str:
        return self._query_url

    def get_rest_url(self) -> str:
        return self._rest_url

    def set_api_key(self, api_key: str) -> "Shopify":
        """Set the API key.

        Args:
            api_key: The new key

        Returns:
            This descriptor, for chaining

        Raises:
            EmptyApiKeyError: If the API key is empty; the stored key is kept
        """
        if not api_key:
            logger.debug("Rejected empty API key for shop %s", self._shop)
            raise EmptyApiKeyError("API key cannot be empty")

        self._api_key = api_key
        logger.debug("API key updated for shop %s", self._shop)
        return self

    def copy(self) -> "Shopify":
        """Return an independent descriptor with the same fields."""
        clone = Shopify(self._shop, self._api_key, self._shared_secret)
        # URLs stay as computed at construction time
        clone._query_url = self._query_url
        clone._rest_url = self._rest_url
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shopify):
            return NotImplemented
        return (
            self._shop == other._shop
            and self._api_key == other._api_key
            and self._shared_secret == other._shared_secret
            and self._query_url == other._query_url
            and self._rest_url == other._rest_url
        )

    def __repr__(self) -> str:
        secret = None if self._shared_secret is None else mask_secret(self._shared_secret)
        return (
            f"Shopify(shop={self._shop!r}, api_key={mask_secret(self._api_key)!r}, "
            f"shared_secret={secret!r})"
        )
