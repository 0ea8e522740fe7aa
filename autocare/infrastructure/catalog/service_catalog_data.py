from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from autocare.domain.entities.service_catalog import ServiceCatalogEntry, ServiceCategory

GST_RATE = Decimal("0.18")


def _catalog(*entries: ServiceCatalogEntry) -> Mapping[str, ServiceCatalogEntry]:
    return MappingProxyType({entry.service_id: entry for entry in entries})


WASH_CATALOG = _catalog(
    ServiceCatalogEntry(
        service_id="basic-wash",
        category=ServiceCategory.wash,
        base_price=19900,
        tax_rate=GST_RATE,
        display_name="Basic Wash",
    ),
    ServiceCatalogEntry(
        service_id="premium-wash",
        category=ServiceCategory.wash,
        base_price=39900,
        tax_rate=GST_RATE,
        discount_rate=Decimal("0.10"),
        display_name="Premium Wash",
    ),
    ServiceCatalogEntry(
        service_id="full-detailing",
        category=ServiceCategory.wash,
        base_price=79900,
        tax_rate=GST_RATE,
        discount_rate=Decimal("0.15"),
        display_name="Full Detailing",
    ),
    ServiceCatalogEntry(
        service_id="interior-only",
        category=ServiceCategory.wash,
        base_price=29900,
        tax_rate=GST_RATE,
        display_name="Interior Only",
    ),
)

MECHANIC_CATALOG = _catalog(
    ServiceCatalogEntry(
        service_id="emergency-roadside",
        category=ServiceCategory.mechanic,
        base_price=29900,
        tax_rate=GST_RATE,
        display_name="Emergency Roadside",
    ),
    ServiceCatalogEntry(
        service_id="engine-diagnostics",
        category=ServiceCategory.mechanic,
        base_price=99900,
        tax_rate=GST_RATE,
        display_name="Engine Diagnostics",
    ),
    ServiceCatalogEntry(
        service_id="tire-services",
        category=ServiceCategory.mechanic,
        base_price=39900,
        tax_rate=GST_RATE,
        display_name="Tire Services",
    ),
    ServiceCatalogEntry(
        service_id="battery-services",
        category=ServiceCategory.mechanic,
        base_price=49900,
        tax_rate=GST_RATE,
        display_name="Battery Services",
    ),
    ServiceCatalogEntry(
        service_id="oil-change",
        category=ServiceCategory.mechanic,
        base_price=59900,
        tax_rate=GST_RATE,
        display_name="Oil Change",
    ),
    ServiceCatalogEntry(
        service_id="ac-repair",
        category=ServiceCategory.mechanic,
        base_price=89900,
        tax_rate=GST_RATE,
        display_name="AC Repair",
    ),
)

SERVICE_CATALOG: Mapping[ServiceCategory, Mapping[str, ServiceCatalogEntry]] = MappingProxyType(
    {
        ServiceCategory.wash: WASH_CATALOG,
        ServiceCategory.mechanic: MECHANIC_CATALOG,
    }
)
