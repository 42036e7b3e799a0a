from datetime import date
from decimal import Decimal
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from database import Base, create_db_engine, create_session_factory
from models.agents import Agent  # Import models so their tables get created
from models.customers import Customer
from models.company import Company
from models.orders import Order

logger = logging.getLogger(__name__)

SAMPLE_AGENTS = [
    {"agent_code": "A007", "agent_name": "Ramasundar", "working_area": "Bangalore",
     "commission": Decimal("0.15"), "phone_no": "077-25814763", "country": None},
    {"agent_code": "A003", "agent_name": "Alex", "working_area": "London",
     "commission": Decimal("0.13"), "phone_no": "075-12458969", "country": None},
    {"agent_code": "A008", "agent_name": "Alford", "working_area": "New York",
     "commission": Decimal("0.12"), "phone_no": "044-25874365", "country": None},
    {"agent_code": "A011", "agent_name": "Ravi Kumar", "working_area": "Bangalore",
     "commission": Decimal("0.15"), "phone_no": "077-45625874", "country": None},
]

SAMPLE_CUSTOMERS = [
    {"cust_code": "C00013", "cust_name": "Holmes", "cust_city": "London", "working_area": "London",
     "cust_country": "UK", "grade": 2, "opening_amt": Decimal("6000.00"), "receive_amt": Decimal("5000.00"),
     "payment_amt": Decimal("7000.00"), "outstanding_amt": Decimal("4000.00"), "phone_no": "BBBBBBB",
     "agent_code": "A003"},
    {"cust_code": "C00001", "cust_name": "Micheal", "cust_city": "New York", "working_area": "New York",
     "cust_country": "USA", "grade": 2, "opening_amt": Decimal("3000.00"), "receive_amt": Decimal("5000.00"),
     "payment_amt": Decimal("2000.00"), "outstanding_amt": Decimal("6000.00"), "phone_no": "CCCCCCC",
     "agent_code": "A008"},
]

SAMPLE_COMPANIES = [
    {"company_id": "18", "company_name": "Order All", "company_city": "Boston"},
    {"company_id": "15", "company_name": "Jack Hill Ltd", "company_city": "London"},
    {"company_id": "16", "company_name": "Akas Foods", "company_city": "Delhi"},
]

SAMPLE_ORDERS = [
    {"ord_num": 200100, "ord_amount": Decimal("1000.00"), "advance_amount": Decimal("600.00"),
     "ord_date": date(2008, 8, 1), "cust_code": "C00013", "agent_code": "A003", "ord_description": "SOD"},
    {"ord_num": 200110, "ord_amount": Decimal("3000.00"), "advance_amount": Decimal("500.00"),
     "ord_date": date(2008, 4, 15), "cust_code": "C00001", "agent_code": "A008", "ord_description": "SOD"},
    {"ord_num": 200107, "ord_amount": Decimal("4500.00"), "advance_amount": Decimal("900.00"),
     "ord_date": date(2008, 8, 30), "cust_code": "C00001", "agent_code": "A008", "ord_description": "SOD"},
]


def seed_sample_data(session_factory: sessionmaker):
    """Insert the sample rows into any table that is still empty."""
    db = session_factory()
    try:
        for model, rows in (
            (Agent, SAMPLE_AGENTS),
            (Customer, SAMPLE_CUSTOMERS),
            (Company, SAMPLE_COMPANIES),
            (Order, SAMPLE_ORDERS),
        ):
            if db.query(model).first():
                logger.info(f"{model.__tablename__} already has data")
                continue
            db.add_all(model(**row) for row in rows)
            logger.info(f"Seeded {len(rows)} rows into {model.__tablename__}")
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_database(engine: Engine, session_factory: sessionmaker, seed_sample: bool = False):
    """Create tables and optionally seed sample data."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    if seed_sample:
        seed_sample_data(session_factory)


if __name__ == "__main__":
    from config.settings import settings

    logging.basicConfig(level=settings.LOG_LEVEL)
    engine = create_db_engine(settings)
    try:
        init_database(engine, create_session_factory(engine), seed_sample=True)
    finally:
        engine.dispose()
