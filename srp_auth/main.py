from typing import Optional
from fastapi import FastAPI

from srp_auth.api.logon import router as logon_router
from srp_auth.config.settings import settings, configure_logging
from srp_auth.core.provider import SrpAuthenticationProvider
from srp_auth.core.srp_parameters import SrpParameters
from srp_auth.db.models import Base
from srp_auth.db.repository import SqlAlchemyAccountRepository
from srp_auth.infrastructure.db import get_session_factory, init_tables
from srp_auth.infrastructure.pending_store import create_pending_store


def create_app(provider: SrpAuthenticationProvider) -> FastAPI:
    app = FastAPI(title="SRP Auth Service")
    app.state.auth_provider = provider

    # ROUTES:
    app.include_router(logon_router) # SRP

    @app.get("/")
    def root():
        return {"message": "SRP-6a logon endpoint running. Check /docs for endpoints."}

    return app


def build_provider(parameters: Optional[SrpParameters] = None) -> SrpAuthenticationProvider:
    # wire the provider from settings: SQL account store + pending store (Redis or in-memory)
    parameters = parameters or SrpParameters.from_settings(settings)
    init_tables(Base)
    repository = SqlAlchemyAccountRepository(get_session_factory())
    unknown_user_salt = settings.unknown_user_salt.get_secret_value() if settings.unknown_user_salt else None
    return SrpAuthenticationProvider(repository, parameters, create_pending_store(settings), unknown_user_salt)


def build_app() -> FastAPI:
    # uvicorn srp_auth.main:build_app --factory
    configure_logging()
    return create_app(build_provider())
