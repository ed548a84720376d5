"""Shopify Admin API versions and their end-of-support dates."""

from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Union

from pydantic import BaseModel


Clock = Callable[[], datetime]


class UnknownApiVersionError(ValueError):
    """Raised when a version tag is not part of the registry."""
    pass


class ApiVersion(str, Enum):
    """Supported Shopify Admin API versions, oldest first."""

    V2021_10 = "2021-10"
    V2022_01 = "2022-01"
    V2022_04 = "2022-04"
    V2022_07 = "2022-07"
    V2022_10 = "2022-10"
    V2023_01 = "2023-01"
    UNSTABLE = "unstable"

    def __str__(self) -> str:
        return self.value


class VersionMetadata(BaseModel):
    """Display tag and end-of-support instant for one API version."""

    display: str
    end_of_support: datetime

    model_config = {"frozen": True}


def _eos(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, 23, 59, 59, tzinfo=timezone.utc)


# One row per ApiVersion member. Add new releases here.
_VERSIONS: Mapping[ApiVersion, VersionMetadata] = MappingProxyType({
    ApiVersion.V2021_10: VersionMetadata(display="2021-10", end_of_support=_eos(2021, 10, 31)),
    ApiVersion.V2022_01: VersionMetadata(display="2022-01", end_of_support=_eos(2022, 1, 31)),
    ApiVersion.V2022_04: VersionMetadata(display="2022-04", end_of_support=_eos(2022, 4, 30)),
    ApiVersion.V2022_07: VersionMetadata(display="2022-07", end_of_support=_eos(2022, 7, 31)),
    ApiVersion.V2022_10: VersionMetadata(display="2022-10", end_of_support=_eos(2022, 10, 31)),
    ApiVersion.V2023_01: VersionMetadata(display="2023-01", end_of_support=_eos(2023, 1, 31)),
    ApiVersion.UNSTABLE: VersionMetadata(display="unstable", end_of_support=_eos(9999, 12, 31)),
})


def utc_now() -> datetime:
    """Default clock: the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def get_version_metadata(api_version: ApiVersion) -> VersionMetadata:
    """Return the registry row for ``api_version``."""
    return _VERSIONS[api_version]


def get_end_of_support_date(api_version: ApiVersion) -> datetime:
    """Get the end of support date for a given API version.

    Released versions stop being supported at 23:59:59 UTC on the last day of
    their release month. ``ApiVersion.UNSTABLE`` returns 9999-12-31 23:59:59,
    meaning it is never deprecated.
    """
    return _VERSIONS[api_version].end_of_support


def is_deprecated(api_version: ApiVersion, clock: Optional[Clock] = None) -> bool:
    """Check if an API version is no longer supported.

    Args:
        api_version: Version to check
        clock: Callable returning the current UTC datetime. Defaults to the
            wall clock. Naive datetimes are taken to be UTC.

    Returns:
        True when the current time is past the version's end of support
    """
    now = (clock or utc_now)()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now > get_end_of_support_date(api_version)


def api_version_to_string(api_version: ApiVersion) -> str:
    """Transform an API version into its tag, e.g. ``"2021-10"``."""
    return _VERSIONS[api_version].display


def parse_api_version(value: Union[str, ApiVersion]) -> ApiVersion:
    """Parse a version tag such as ``"2022-10"`` or ``"unstable"``.

    Raises:
        UnknownApiVersionError: If the tag is not a known version
    """
    if isinstance(value, ApiVersion):
        return value

    tag = str(value).strip()
    for api_version, metadata in _VERSIONS.items():
        if metadata.display == tag:
            return api_version

    known = ", ".join(m.display for m in _VERSIONS.values())
    raise UnknownApiVersionError(f"Unknown API version '{value}'. Expected one of: {known}")


def supported_versions(clock: Optional[Clock] = None) -> List[ApiVersion]:
    """List the versions that are not deprecated, oldest first."""
    now = (clock or utc_now)()
    return [v for v in ApiVersion if not is_deprecated(v, lambda: now)]


def latest_stable_version(clock: Optional[Clock] = None) -> Optional[ApiVersion]:
    """Newest released version that is still supported, if any."""
    stable = [v for v in supported_versions(clock) if v is not ApiVersion.UNSTABLE]
    return stable[-1] if stable else None
