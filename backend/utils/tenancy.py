import logging
from typing import Optional

from fastapi import Header

logger = logging.getLogger(__name__)


def get_tenant_id(x_tenant_id: Optional[str] = Header(None)) -> Optional[str]:
    # A missing tenant is not an error: reports come back empty instead.
    if not x_tenant_id or not x_tenant_id.strip():
        logger.warning("X-Tenant-ID header is missing; the report will be empty.")
        return None
    return x_tenant_id.strip()


def belongs_to_tenant(record, tenant_id: Optional[str]) -> bool:
    """Records without a company id are assumed to be pre-filtered by the caller."""
    record_tenant = getattr(record, "company_id", None)
    return record_tenant is None or record_tenant == tenant_id
