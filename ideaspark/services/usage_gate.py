"""
Daily usage gate for anonymous content generation.

Anonymous callers are identified by IP address and get a fixed number of
free generations per UTC calendar day. Authenticated callers are never
counted.

The check and the increment are separate calls: the increment only happens
after the provider call succeeded, so failed generations do not consume
quota. Two concurrent requests from one IP can both pass the check, which
makes the limit soft rather than a hard quota.
"""
import logging
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from ideaspark.core.errors import LimitExceededError
from ideaspark.db.models.usage_tracking import UsageTracking

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Usage date for the current request."""
    return datetime.now(timezone.utc).date()


class UsageGate:
    def __init__(self, db: Session, daily_limit: int = 2):
        self.db = db
        self.daily_limit = daily_limit

    def get_count(self, ip_address: str, usage_date: date) -> int:
        """Get the generation count for an IP on a date (0 when unseen)."""
        usage = self.db.query(UsageTracking).filter(
            UsageTracking.ip_address == ip_address,
            UsageTracking.usage_date == usage_date
        ).first()

        return usage.generation_count if usage else 0

    def remaining(self, ip_address: str, usage_date: date) -> int:
        return max(0, self.daily_limit - self.get_count(ip_address, usage_date))

    def check(self, ip_address: str, usage_date: date, is_authenticated: bool) -> int:
        """
        Decide whether a generation may proceed. Nothing is written.

        Returns:
            The caller's current count (0 for authenticated callers)

        Raises:
            LimitExceededError: Anonymous caller already at the daily limit
        """
        if is_authenticated:
            return 0

        count = self.get_count(ip_address, usage_date)
        if count >= self.daily_limit:
            logger.warning(f"Daily limit reached for ip={ip_address}, date={usage_date}, count={count}")
            raise LimitExceededError()

        return count

    def record_generation(self, ip_address: str, usage_date: date) -> int:
        """
        Count one accepted generation and return the new count.

        Uses a single INSERT .. ON CONFLICT DO UPDATE where the dialect
        supports it so concurrent increments are never lost.
        """
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            return self._record_generation_orm(ip_address, usage_date)

        table = UsageTracking.__table__
        stmt = insert(table).values(
            ip_address=ip_address,
            usage_date=usage_date,
            generation_count=1,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.ip_address, table.c.usage_date],
            set_={
                "generation_count": table.c.generation_count + 1,
                "updated_at": func.now(),
            },
        ).returning(table.c.generation_count)

        count = self.db.execute(stmt).scalar_one()
        self.db.commit()

        logger.info(f"Recorded anonymous generation for ip={ip_address}, date={usage_date}, count={count}")
        return count

    def _record_generation_orm(self, ip_address: str, usage_date: date) -> int:
        usage = self.db.query(UsageTracking).filter(
            UsageTracking.ip_address == ip_address,
            UsageTracking.usage_date == usage_date
        ).first()

        if usage:
            usage.generation_count += 1
        else:
            usage = UsageTracking(
                ip_address=ip_address,
                usage_date=usage_date,
                generation_count=1
            )
            self.db.add(usage)

        self.db.commit()
        logger.info(f"Recorded anonymous generation for ip={ip_address}, date={usage_date}, count={usage.generation_count}")
        return usage.generation_count
