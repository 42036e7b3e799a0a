from .agents import router as agents_router
from .customers import router as customers_router
from .company import router as company_router
from .orders import router as orders_router
from fastapi import APIRouter

# Create main router
router = APIRouter()

# Include agents routes
router.include_router(agents_router, prefix="/agents", tags=["Agents"])

# Include customers routes
router.include_router(customers_router, prefix="/customers", tags=["Customers"])

# Include company routes
router.include_router(company_router, prefix="/companies", tags=["Companies"])

# Include orders routes
router.include_router(orders_router, prefix="/orders", tags=["Orders"])

__all__ = ["router"]
