from typing import Iterator

from fastapi import Depends, Request

from .config.settings import Settings, get_settings
from .services.relay_service import RelayService
from .storage.memory_store import MemoryStore


def get_relay_service(settings: Settings = Depends(get_settings)) -> Iterator[RelayService]:
    """Dependency provider for RelayService, closing its HTTP session afterwards"""
    service = RelayService(settings)
    try:
        yield service
    finally:
        service.close()


def get_store(request: Request) -> MemoryStore:
    """Dependency provider for the application-owned MemoryStore"""
    return request.app.state.store
