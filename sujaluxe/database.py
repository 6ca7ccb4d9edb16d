from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from sujaluxe.config import settings


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {
            "pool_pre_ping": True,   # checks dead connections
            "pool_recycle": 1800,    # refresh every 30 min
        }

    options = {"connect_args": {"check_same_thread": False}}
    # in-memory databases live on a single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(
    settings.database_url,
    echo=False,
    **_engine_options(settings.database_url),
)


def create_db_and_tables():
    import sujaluxe.models  # noqa: F401  registers every table
    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
