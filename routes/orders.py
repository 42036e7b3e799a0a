from decimal import Decimal, InvalidOperation
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from dependencies import get_db
from errors import StorageError, ValidationError, field_error
from models.orders import Order
from schemas.orders import OrderResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def parse_min_amount(raw: Optional[str]) -> Optional[Decimal]:
    """Empty means no filter; anything else must be a finite number."""
    if raw is None or raw.strip() == "":
        return None
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite():
        raise ValidationError([field_error("min_amount", "min_amount must be a number", "query", raw)])
    return amount


@router.get(
    "",
    response_model=List[OrderResponse],
    summary="Retrieve orders optionally filtered by minimum amount",
    responses={400: {"description": "min_amount is not a number"}, 500: {"description": "Failed to fetch orders"}},
)
def get_orders(
    min_amount: Optional[str] = Query(None, description="Minimum amount of order to filter by"),
    db: Session = Depends(get_db),
):
    threshold = parse_min_amount(min_amount)

    try:
        query = db.query(Order)
        if threshold is not None:
            query = query.filter(Order.ord_amount >= threshold)
        return query.all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch orders")
        raise StorageError("Failed to fetch orders.")
