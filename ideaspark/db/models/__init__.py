"""
Database models module.

Imports every model so it is registered with SQLAlchemy's Base.metadata
before table creation and migrations.
"""
from ideaspark.db.models.user import User
from ideaspark.db.models.usage_tracking import UsageTracking

__all__ = [
    "User",
    "UsageTracking",
]
