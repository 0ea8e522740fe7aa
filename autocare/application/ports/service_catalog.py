from __future__ import annotations

from abc import ABC, abstractmethod

from autocare.domain.entities.service_catalog import ServiceCatalogEntry, ServiceCategory


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_id: str, category: ServiceCategory) -> ServiceCatalogEntry | None:
        """Get catalog entry by service id within one category. None if absent."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self, category: ServiceCategory) -> list[ServiceCatalogEntry]:
        """List entries of a category in catalog order."""
        raise NotImplementedError
