from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.pool import StaticPool
from .settings import settings


def build_engine(url: str):
    if not url.startswith("sqlite"):
        return create_engine(url)
    # check_same_thread=False is needed only for SQLite
    connect_args = {"check_same_thread": False}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # A single shared connection, otherwise every session sees an empty database
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, connect_args=connect_args)

engine = build_engine(settings.DATABASE_URL)

def create_db_and_tables(bind=None):
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
