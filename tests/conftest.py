import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from core.db import Base, dispose_db
from core.models import PrayerTimeRow
from core.schedule import DailySchedule
from utils.config_loader import DEFAULT_CONFIG, _merge

ROWS = [
    {"date": "02-17", "bayani": "05:12", "xorhalatn": "06:35", "niwaro": "12:10",
     "asr": "15:18", "eywara": "17:45", "esha": "19:02"},
    {"date": "02-18", "bayani": "05:11", "xorhalatn": "06:34", "niwaro": "12:10",
     "asr": "15:19", "eywara": "17:46", "esha": "19:03"},
    {"date": "03-19", "bayani": "04:38", "xorhalatn": "06:00", "niwaro": "12:04",
     "asr": "15:30", "eywara": "18:08", "esha": "19:25"},
    {"date": "03-20", "bayani": "04:37", "xorhalatn": "05:58", "niwaro": "12:03",
     "asr": "15:30", "eywara": "18:09", "esha": "19:26"},
]


@pytest.fixture
def schedules():
    return [DailySchedule.from_row(row) for row in ROWS]


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "player.db"
    engine = create_engine(f"sqlite:///{path}", future=True)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        for row in ROWS:
            session.add(PrayerTimeRow(cities="Hawler", iso="IQ", **row))
        session.add(PrayerTimeRow(cities="Duhok", iso="IQ", date="02-18", bayani="05:20",
                                  xorhalatn="06:44", niwaro="12:18", asr="15:25",
                                  eywara="17:52", esha="19:10"))
        session.add(PrayerTimeRow(cities="Hawler", iso="IQ", date="03-01", bayani="5:xx",
                                  xorhalatn="06:20", niwaro="12:08", asr="15:25",
                                  eywara="17:58", esha="19:14"))
        session.commit()
    engine.dispose()
    yield path
    dispose_db()


@pytest.fixture
def config(db_path):
    return _merge(DEFAULT_CONFIG, {
        "database": {"path": str(db_path)},
        "data_window": {"start": "02-18", "end": "03-19"},
        "ramadan": {"start": "02-18", "end": "03-19"},
        "settings": {"timezone": None},
    })
