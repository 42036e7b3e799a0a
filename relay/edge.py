"""
Echo function for the keyword relay.

`handler` follows the API-gateway proxy event shape (`queryStringParameters`)
so it can be deployed as a cloud function; `edge_app` serves the same
handler over HTTP for local runs.
"""
from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config.settings import settings

logger = logging.getLogger(__name__)


def handler(event: Dict[str, Any], context: Optional[Any] = None, speaker: Optional[str] = None) -> Dict[str, Any]:
    params = event.get("queryStringParameters") or {}
    keyword = params.get("keyword")
    if keyword is None:
        return {"statusCode": 400, "body": "Missing keyword."}

    message = f"{speaker or settings.RELAY_SPEAKER} says {keyword}"
    logger.info(message)
    return {"statusCode": 200, "body": message}


edge_app = FastAPI(title="Keyword Echo", version=settings.API_VERSION)


@edge_app.get("/say", response_class=PlainTextResponse)
def say(request: Request):
    result = handler({"queryStringParameters": dict(request.query_params)})
    return PlainTextResponse(result["body"], status_code=result["statusCode"])


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(edge_app, host="0.0.0.0", port=settings.EDGE_PORT)
