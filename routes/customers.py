from fastapi import APIRouter, Depends, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from dependencies import get_db
from errors import NotFoundError, StorageError
from models.customers import Customer
from schemas.customers import CustomerResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{cust_code}",
    response_model=CustomerResponse,
    summary="Retrieve a customer by ID",
    responses={404: {"description": "Customer not found"}, 500: {"description": "Failed to fetch customer"}},
)
def get_customer(
    cust_code: str = Path(..., description="The customer's code"),
    db: Session = Depends(get_db),
):
    """Get a specific customer by CUST_CODE"""
    try:
        customer = db.query(Customer).filter(Customer.cust_code == cust_code).first()
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch customer {cust_code}")
        raise StorageError("Failed to fetch customer.")

    if not customer:
        raise NotFoundError("Customer not found.")
    return customer
