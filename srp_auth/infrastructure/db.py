# === DB session maker ===
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import Session, sessionmaker
from srp_auth.config.settings import settings

# account store engine & session (created on first use)
_engine = None
_session_factory = None

def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(settings.database_url, echo=False)
    return _engine

def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), class_=Session, expire_on_commit=False)
    return _session_factory

def init_tables(models, engine: Engine | None = None):
    engine = engine or get_engine()
    with engine.begin() as conn:
        models.metadata.create_all(conn) # idempotent, only creates tables if they don't exist
