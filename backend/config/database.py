from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .settings import get_settings

# Get database URL from centralized settings
settings = get_settings()
SQLALCHEMY_DATABASE_URL = settings.database_url

# connect_args is only needed for SQLite; PostgreSQL connections get pooling instead.
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False
    )
else:
    # PostgreSQL with connection pooling for production
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=settings.pool_pre_ping,
        pool_recycle=3600,  # Recycle connections after 1 hour
        echo=False
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Import Base from the shared domain models
from ..domains.shared.db_base import Base
