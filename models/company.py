from sqlalchemy import Column, String
from database import Base

class Company(Base):
    __tablename__ = 'company'
    
    company_id = Column("COMPANY_ID", String(6), primary_key=True)
    company_name = Column("COMPANY_NAME", String(25), nullable=True)
    company_city = Column("COMPANY_CITY", String(25), nullable=True)
