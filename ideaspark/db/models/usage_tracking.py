from sqlalchemy import Column, Integer, String, DateTime, Date, UniqueConstraint
from sqlalchemy.sql import func
from ideaspark.db.base import Base


class UsageTracking(Base):
    """
    Daily generation counter for anonymous callers, keyed by IP address.

    One row per (ip_address, usage_date). The count only grows within a day;
    a new date starts a new row, so rows are kept as history.
    """
    __tablename__ = "usage_tracking"

    id = Column(Integer, primary_key=True, index=True)
    ip_address = Column(String(45), nullable=False, index=True)  # fits IPv6
    usage_date = Column(Date, nullable=False, index=True)
    generation_count = Column(Integer, default=0, server_default="0", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Unique constraint: one record per IP per day
    __table_args__ = (
        UniqueConstraint("ip_address", "usage_date", name="uq_usage_ip_date"),
    )
