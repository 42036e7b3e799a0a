from database import Base
from .agents import Agent
from .customers import Customer
from .company import Company
from .orders import Order

__all__ = ["Base", "Agent", "Customer", "Company", "Order"]
