"""Credentials used for every monitoring API request."""

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator

from solaredge_monitoring.exceptions import BulkSiteListError


MAX_BULK_SITES = 100


def check_bulk_site_ids(site_ids: Sequence[str]) -> Tuple[str, ...]:
    """Return the bulk site list as a tuple, rejecting sizes outside 1..100."""
    if isinstance(site_ids, (str, bytes)):
        raise BulkSiteListError(f"Bulk site list must be a sequence of site ids, got {type(site_ids).__name__}")
    site_ids = tuple(str(site_id) for site_id in site_ids)
    if not 1 <= len(site_ids) <= MAX_BULK_SITES:
        raise BulkSiteListError(
            f"Bulk site list must hold between 1 and {MAX_BULK_SITES} site ids, got {len(site_ids)}"
        )
    return site_ids


class Credentials(BaseModel):
    """Site id and api key for accessing the monitoring server.

    The api key is kept as a secret so it never shows up in reprs or logs.
    An optional bulk site list can be attached with ``with_bulk_sites`` for
    endpoints that query several sites in one call.
    """

    model_config = ConfigDict(frozen=True)

    site_id: str
    api_key: SecretStr
    bulk_site_ids: Optional[Tuple[str, ...]] = None

    @field_validator("bulk_site_ids", mode="before")
    @classmethod
    def validate_bulk_site_ids(cls, v: Optional[Sequence[str]]) -> Optional[Tuple[str, ...]]:
        """Enforce the 1..100 bound on the bulk site list."""
        if v is None:
            return None
        return check_bulk_site_ids(v)

    def with_bulk_sites(self, site_ids: Sequence[str]) -> "Credentials":
        """Return a copy of these credentials carrying the given bulk site list."""
        return self.model_copy(update={"bulk_site_ids": check_bulk_site_ids(site_ids)})

    @property
    def bulk_sites(self) -> str:
        """Comma-joined bulk site list as used in bulk URLs."""
        if not self.bulk_site_ids:
            raise BulkSiteListError("No bulk site list attached to these credentials")
        return ",".join(self.bulk_site_ids)
