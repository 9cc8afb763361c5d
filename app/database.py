from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.config import DATABASE_URL

# Create SQLAlchemy engine
engine = create_engine(DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Define Base for models
class Base(DeclarativeBase):
    pass


# Dependency to get a DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create the metadata tables if they do not exist yet."""
    # Register models on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
