"""
ORM mapping of the externally owned Kurdistan prayer times table.
"""
from sqlalchemy import Column, String

from core.db import Base


class PrayerTimeRow(Base):
    """One city's prayer times for one MM-DD date. Times are "HH:MM" strings."""
    __tablename__ = "PrayerTimesforKurdistantable"

    # The table has no declared key; (cities, iso, date) is unique in practice.
    cities = Column(String, primary_key=True)
    iso = Column(String, primary_key=True)
    date = Column(String, primary_key=True)

    bayani = Column(String)
    xorhalatn = Column(String)
    niwaro = Column(String)
    asr = Column(String)
    eywara = Column(String)
    esha = Column(String)
