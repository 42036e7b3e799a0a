"""
Shared fixtures: every test gets its own app bound to a fresh in-memory
SQLite database.
"""
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app
from models.agents import Agent
from models.company import Company
from models.customers import Customer
from models.orders import Order


VALID_AGENT = {
    "AGENT_CODE": "A001",
    "AGENT_NAME": "Smith",
    "WORKING_AREA": "Delhi",
    "COMMISSION": 0.15,
    "PHONE_NO": "+14155552671",
}


def make_settings(**overrides) -> Settings:
    values = {"DATABASE_URL": "sqlite://", "SEED_SAMPLE_DATA": False, "REPORT_MISSING_ON_UPDATE": False}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client):
    db = client.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def agent_payload():
    return dict(VALID_AGENT)


@pytest.fixture
def sample_rows(db_session):
    db_session.add_all([
        Agent(agent_code="A003", agent_name="Alex", working_area="London",
              commission=Decimal("0.13"), phone_no="075-12458969", country=None),
        Customer(cust_code="C00013", cust_name="Holmes", cust_city="London", working_area="London",
                 cust_country="UK", grade=2, opening_amt=Decimal("6000.00"), receive_amt=Decimal("5000.00"),
                 payment_amt=Decimal("7000.00"), outstanding_amt=Decimal("4000.00"), phone_no="BBBBBBB",
                 agent_code="A003"),
        Company(company_id="18", company_name="Order All", company_city="Boston"),
        Company(company_id="15", company_name="Jack Hill Ltd", company_city="London"),
        Order(ord_num=200100, ord_amount=Decimal("1000.00"), advance_amount=Decimal("600.00"),
              ord_date=date(2008, 8, 1), cust_code="C00013", agent_code="A003", ord_description="SOD"),
        Order(ord_num=200101, ord_amount=Decimal("5000.00"), advance_amount=Decimal("1000.00"),
              ord_date=date(2008, 7, 15), cust_code="C00013", agent_code="A003", ord_description="SOD"),
        Order(ord_num=200102, ord_amount=Decimal("8000.00"), advance_amount=Decimal("2000.00"),
              ord_date=date(2008, 9, 30), cust_code="C00013", agent_code="A003", ord_description="SOD"),
    ])
    db_session.commit()
