from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from config.settings import Settings
from dependencies import get_db, get_settings
from errors import NotFoundError, StorageError
from models.agents import Agent
from schemas.agents import AgentCreate, AgentReplace, AgentCommissionUpdate, AgentResponse

router = APIRouter()
logger = logging.getLogger(__name__)

_VALIDATION_FAILED = {"description": "Validation failed"}


def _check_affected(rows: int, agent_code: str, settings: Settings) -> None:
    """Zero affected rows is only an error when the app is configured to say so."""
    if rows == 0:
        logger.info(f"No agent matched {agent_code}")
        if settings.REPORT_MISSING_ON_UPDATE:
            raise NotFoundError("Agent not found.")


@router.get(
    "",
    response_model=List[AgentResponse],
    summary="Retrieve a list of all agents",
    responses={500: {"description": "Failed to fetch agents"}},
)
def get_agents(db: Session = Depends(get_db)):
    """Get all agents. Order is whatever the database returns."""
    try:
        return db.query(Agent).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch agents")
        raise StorageError("Failed to fetch agents.")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    summary="Add a new agent",
    responses={201: {"description": "Agent added"}, 400: _VALIDATION_FAILED, 500: {"description": "Failed to add agent"}},
)
def create_agent(agent: AgentCreate, db: Session = Depends(get_db)):
    """Insert a new agent. Duplicate codes are left to the primary key constraint."""
    try:
        db.add(Agent(**agent.dict()))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to add agent {agent.agent_code}")
        raise StorageError("Failed to add agent.")

    logger.info(f"Added agent {agent.agent_code}")
    return PlainTextResponse("Agent added.", status_code=status.HTTP_201_CREATED)


@router.patch(
    "/{agent_code}",
    response_class=PlainTextResponse,
    summary="Update an agent's commission",
    responses={400: _VALIDATION_FAILED, 404: {"description": "Agent not found (only when configured)"},
               500: {"description": "Failed to update agent"}},
)
def update_agent_commission(
    update: AgentCommissionUpdate,
    agent_code: str = Path(..., description="The agent's code"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    try:
        rows = (
            db.query(Agent)
            .filter(Agent.agent_code == agent_code)
            .update({Agent.commission: update.commission}, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update commission for agent {agent_code}")
        raise StorageError("Failed to update agent.")

    _check_affected(rows, agent_code, settings)
    logger.info(f"Updated commission for agent {agent_code}")
    return "Agent's commission updated."


@router.put(
    "/{agent_code}",
    response_class=PlainTextResponse,
    summary="Replace an agent's data",
    responses={400: _VALIDATION_FAILED, 404: {"description": "Agent not found (only when configured)"},
               500: {"description": "Failed to replace agent"}},
)
def replace_agent(
    agent: AgentReplace,
    agent_code: str = Path(..., description="The agent's code"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Overwrite every field except AGENT_CODE. A missing COUNTRY is stored as NULL."""
    values = {getattr(Agent, field): value for field, value in agent.dict().items()}
    try:
        rows = (
            db.query(Agent)
            .filter(Agent.agent_code == agent_code)
            .update(values, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to replace agent {agent_code}")
        raise StorageError("Failed to replace agent.")

    _check_affected(rows, agent_code, settings)
    logger.info(f"Replaced agent {agent_code}")
    return "Agent replaced."


@router.delete(
    "/{agent_code}",
    response_class=PlainTextResponse,
    summary="Remove an agent",
    responses={400: _VALIDATION_FAILED, 404: {"description": "Agent not found"},
               500: {"description": "Failed to delete agent"}},
)
def delete_agent(
    agent_code: str = Path(..., pattern=r"^[A-Za-z0-9]+$", description="The agent's code"),
    db: Session = Depends(get_db),
):
    try:
        rows = (
            db.query(Agent)
            .filter(Agent.agent_code == agent_code)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to delete agent {agent_code}")
        raise StorageError("Failed to delete agent.")

    if rows == 0:
        raise NotFoundError("Agent not found.")

    logger.info(f"Deleted agent {agent_code}")
    return "Agent deleted successfully."
