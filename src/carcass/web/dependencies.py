"""FastAPI dependency injection for carcass services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from carcass.application.factory import ServiceFactory, get_factory
from carcass.application.templates import TemplateManager
from carcass.web.sessions import SessionStore


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    """Process-wide store of designer sessions."""
    return SessionStore()


def get_template_manager() -> TemplateManager:
    return TemplateManager()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
