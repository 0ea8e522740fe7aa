from __future__ import annotations

from typing import Mapping

from autocare.application.ports.service_catalog import ServiceCatalogPort
from autocare.domain.entities.service_catalog import ServiceCatalogEntry, ServiceCategory
from autocare.infrastructure.catalog.service_catalog_data import SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(
        self,
        catalog: Mapping[ServiceCategory, Mapping[str, ServiceCatalogEntry]] | None = None,
    ) -> None:
        self._catalog = catalog or SERVICE_CATALOG

    def get_service(self, service_id: str, category: ServiceCategory) -> ServiceCatalogEntry | None:
        return self._catalog.get(category, {}).get(service_id)

    def list_services(self, category: ServiceCategory) -> list[ServiceCatalogEntry]:
        return list(self._catalog.get(category, {}).values())
