from contextlib import asynccontextmanager
from typing import Optional
import logging

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import PlainTextResponse

from config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def create_relay_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the second-tier server that forwards /say to the echo function."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(
            timeout=settings.RELAY_TIMEOUT, transport=transport, follow_redirects=True
        ) as client:
            app.state.http_client = client
            yield

    app = FastAPI(title="Keyword Relay", version=settings.API_VERSION, lifespan=lifespan)

    @app.get("/say", response_class=PlainTextResponse)
    async def say(
        keyword: Optional[str] = Query(None, description="Keyword to forward"),
        client: httpx.AsyncClient = Depends(get_http_client),
    ):
        """Forward the keyword unchanged and return whatever the echo function says"""
        params = {"keyword": keyword} if keyword is not None else {}
        try:
            response = await client.get(settings.RELAY_EDGE_URL, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Relay to {settings.RELAY_EDGE_URL} failed: {e}")
            return PlainTextResponse(f"Error: {e}", status_code=500)
        return PlainTextResponse(response.text)

    return app


app = create_relay_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=default_settings.LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=default_settings.RELAY_PORT)
