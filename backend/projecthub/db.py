from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .core.settings import get_settings

DATABASE_URL = get_settings().sqlalchemy_database_url

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # SQLite connections are shared with the TestClient threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
