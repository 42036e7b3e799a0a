from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from dependencies import get_db
from errors import StorageError
from models.company import Company
from schemas.company import CompanyResponse

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get(
    "",
    response_model=List[CompanyResponse],
    summary="Retrieve a list of all companies",
    responses={500: {"description": "Failed to fetch companies"}},
)
def get_companies(db: Session = Depends(get_db)):
    """Get all companies."""
    try:
        return db.query(Company).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch companies")
        raise StorageError("Failed to fetch companies.")
