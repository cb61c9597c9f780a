from ideaspark.db.session import engine
from ideaspark.db.base import Base


def init_db():
    """Create any missing tables (development path when migrations are not run)."""
    # Register models with Base.metadata
    import ideaspark.db.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
