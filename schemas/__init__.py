from .agents import AgentCreate, AgentReplace, AgentCommissionUpdate, AgentResponse
from .customers import CustomerResponse
from .company import CompanyResponse
from .orders import OrderResponse

__all__ = [
    "AgentCreate", "AgentReplace", "AgentCommissionUpdate", "AgentResponse",
    "CustomerResponse", "CompanyResponse", "OrderResponse",
]
