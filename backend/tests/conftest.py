"""
Pytest fixtures: in-memory SQLite database (foreign keys enforced) and a
TestClient wired to it.

Usage:
    def test_something(db, world):
        integrity_service.delete_period(db, world.ly.id)

    def test_endpoint(client, world):
        client.delete(f"/api/periods/{world.ly.id}")
"""
import os

# Settings are read once at import; never point tests at a real database
os.environ["DATABASE_URL"] = "sqlite://"

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lichsu.db.session import create_db_engine, get_db
from lichsu.main import app
from lichsu.models import Base, Period, Event, EventType, HistoricalFigure, HistoricalSite


@pytest.fixture
def engine():
    engine = create_db_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# Data builders
# =============================================================================

def add_period(db, name, slug, sort_order, **kwargs):
    period = Period(name=name, slug=slug, sort_order=sort_order, **kwargs)
    db.add(period)
    db.commit()
    return period


def add_event(db, period, title, sort_order, **kwargs):
    event = Event(period_id=period.id if period else None, title=title, sort_order=sort_order, **kwargs)
    db.add(event)
    db.commit()
    return event


def add_figure(db, period, name, sort_order, **kwargs):
    figure = HistoricalFigure(
        period_id=period.id if period else None,
        period_text=period.name if period else None,
        name=name,
        sort_order=sort_order,
        **kwargs,
    )
    db.add(figure)
    db.commit()
    return figure


def add_site(db, period, name, sort_order, **kwargs):
    site = HistoricalSite(period_id=period.id if period else None, name=name, sort_order=sort_order, **kwargs)
    db.add(site)
    db.commit()
    return site


@pytest.fixture
def world(db):
    """
    Four periods and some content:

        van_lang   - no dependents
        bac_thuoc  - 2 events, 1 figure, 1 site
        ly         - 1 event (tagged), 2 figures
        tran       - 1 event, 1 site
        (no period) - 1 figure
    """
    van_lang = add_period(db, "Văn Lang - Âu Lạc", "van-lang-au-lac", 0, timeframe="2879 TCN - 179 TCN")
    bac_thuoc = add_period(db, "Bắc thuộc", "bac-thuoc", 1, timeframe="179 TCN - 938")
    ly = add_period(db, "Nhà Lý", "nha-ly", 2, timeframe="1009 - 1225")
    tran = add_period(db, "Nhà Trần", "nha-tran", 3, timeframe="1225 - 1400")

    battle = EventType(name="Chiến tranh", slug="chien-tranh", sort_order=0)
    reform = EventType(name="Cải cách", slug="cai-cach", sort_order=1)
    db.add_all([battle, reform])
    db.commit()

    trung_sisters = add_event(db, bac_thuoc, "Khởi nghĩa Hai Bà Trưng", 0, year="40")
    ba_trieu = add_event(db, bac_thuoc, "Khởi nghĩa Bà Triệu", 1, year="248")
    capital_move = add_event(db, ly, "Dời đô về Thăng Long", 0, year="1010", event_types=[reform, battle])
    bach_dang = add_event(db, tran, "Trận Bạch Đằng 1288", 0, year="1288", event_types=[battle])

    trung_trac = add_figure(db, bac_thuoc, "Trưng Trắc", 0, lifespan="? - 43")
    ly_thai_to = add_figure(db, ly, "Lý Thái Tổ", 0, lifespan="974 - 1028")
    ly_thuong_kiet = add_figure(db, ly, "Lý Thường Kiệt", 1, lifespan="1019 - 1105")
    unknown_poet = add_figure(db, None, "Khuyết danh", 0)

    hat_mon = add_site(db, bac_thuoc, "Đền Hát Môn", 0, location="Hà Nội")
    bach_dang_site = add_site(db, tran, "Bãi cọc Bạch Đằng", 0, location="Quảng Ninh")

    return SimpleNamespace(
        van_lang=van_lang,
        bac_thuoc=bac_thuoc,
        ly=ly,
        tran=tran,
        battle=battle,
        reform=reform,
        trung_sisters=trung_sisters,
        ba_trieu=ba_trieu,
        capital_move=capital_move,
        bach_dang=bach_dang,
        trung_trac=trung_trac,
        ly_thai_to=ly_thai_to,
        ly_thuong_kiet=ly_thuong_kiet,
        unknown_poet=unknown_poet,
        hat_mon=hat_mon,
        bach_dang_site=bach_dang_site,
    )
