"""Application settings read from the environment."""

from __future__ import annotations

import os

from construct_lite.domain.quotation import CompanyProfile


DEFAULT_COMPANY_NAME = "GIANCONSTRUCTION COMPANY"
DEFAULT_COMPANY_ADDRESS = "JY PEREZ AVENUE, KABANKALAN, PHILIPPINES 6111"
DEFAULT_COMPANY_CONTACT = "Tel: 0908 982 1649 | Email: info@gianconstruct.com"
DEFAULT_COMPANY_WEBSITE = "www.gianconstruct.com"


def company_profile() -> CompanyProfile:
    """Letterhead for exported quotations; each line can be overridden by env var."""
    return CompanyProfile(
        name=os.getenv("COMPANY_NAME") or DEFAULT_COMPANY_NAME,
        address=os.getenv("COMPANY_ADDRESS") or DEFAULT_COMPANY_ADDRESS,
        contact=os.getenv("COMPANY_CONTACT") or DEFAULT_COMPANY_CONTACT,
        website=os.getenv("COMPANY_WEBSITE") or DEFAULT_COMPANY_WEBSITE,
    )
