from sqlalchemy import Column, String, Numeric
from database import Base


class Agent(Base):
    __tablename__ = "agents"

    agent_code = Column("AGENT_CODE", String(6), primary_key=True)
    agent_name = Column("AGENT_NAME", String(40), nullable=False)
    working_area = Column("WORKING_AREA", String(35), nullable=False)
    commission = Column("COMMISSION", Numeric(10, 2), nullable=False)
    phone_no = Column("PHONE_NO", String(15), nullable=False)
    country = Column("COUNTRY", String(25), nullable=True)

    def __repr__(self):
        return f"<Agent(agent_code='{self.agent_code}', agent_name='{self.agent_name}')>"
