from fastapi import Request
from sqlalchemy.orm import Session

from config.settings import Settings


def get_db(request: Request):
    """Database dependency. The session goes back to the pool on every exit path."""
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings
