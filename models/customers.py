from sqlalchemy import Column, String, Integer, Numeric
from database import Base


class Customer(Base):
    __tablename__ = "customer"

    cust_code = Column("CUST_CODE", String(6), primary_key=True)
    cust_name = Column("CUST_NAME", String(40), nullable=False)
    cust_city = Column("CUST_CITY", String(35), nullable=True)
    working_area = Column("WORKING_AREA", String(35), nullable=False)
    cust_country = Column("CUST_COUNTRY", String(20), nullable=False)
    grade = Column("GRADE", Integer, nullable=True)

    # Balances
    opening_amt = Column("OPENING_AMT", Numeric(12, 2), nullable=False)
    receive_amt = Column("RECEIVE_AMT", Numeric(12, 2), nullable=False)
    payment_amt = Column("PAYMENT_AMT", Numeric(12, 2), nullable=False)
    outstanding_amt = Column("OUTSTANDING_AMT", Numeric(12, 2), nullable=False)

    phone_no = Column("PHONE_NO", String(17), nullable=False)
    # References agents.AGENT_CODE; the constraint, if any, lives in the schema
    agent_code = Column("AGENT_CODE", String(6), nullable=True)

    def __repr__(self):
        return f"<Customer(cust_code='{self.cust_code}', cust_name='{self.cust_name}')>"
