from sqlalchemy import Column, Date, Integer, Numeric, String
from database import Base


class Order(Base):
    __tablename__ = "orders"

    ord_num = Column("ORD_NUM", Integer, primary_key=True, autoincrement=False)
    ord_amount = Column("ORD_AMOUNT", Numeric(12, 2), nullable=False, index=True)
    advance_amount = Column("ADVANCE_AMOUNT", Numeric(12, 2), nullable=False)
    ord_date = Column("ORD_DATE", Date, nullable=False)
    cust_code = Column("CUST_CODE", String(6), nullable=False)
    agent_code = Column("AGENT_CODE", String(6), nullable=False)
    ord_description = Column("ORD_DESCRIPTION", String(60), nullable=False)

    def __repr__(self):
        return f"<Order(ord_num={self.ord_num}, ord_amount={self.ord_amount})>"
