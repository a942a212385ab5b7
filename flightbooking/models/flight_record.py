from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from flightbooking.db.database import Base


class FlightRecord(Base):
    """Audit entry of a completed search. Written once, never updated here."""

    __tablename__ = "flight_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # raw destination pair as sent by the caller (es. "OPO,LIS")
    fly_to: Mapped[str] = mapped_column(String(255), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    # dates kept in the external dd/mm/YYYY format
    date_to: Mapped[str] = mapped_column(String(10), nullable=False)
    date_from: Mapped[str] = mapped_column(String(10), nullable=False)
    record_date_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    __table_args__ = (
        Index("idx_flight_records_recorded", "record_date_time"),
    )
