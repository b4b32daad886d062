"""Main entrypoint for the Trello sessions FastAPI application.

This module initializes the FastAPI app and exposes the health check and the
sessions endpoint consumed by the front-end.
"""

import os

from dotenv import load_dotenv
from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.responses import JSONResponse

from src.config.settings import TrelloSettings
from src.core.errors import TrelloSessionsError
from src.core.sessions_flow import fetch_trello_sessions
from src.presenters.session_presenter import present_error
from src.presenters.session_presenter import present_sessions
from src.presenters.session_presenter import present_unexpected_error
from src.utils.logger import generate_request_id
from src.utils.logger import log_error
from src.utils.logger import log_info


load_dotenv()

app = FastAPI(title="Trello Sessions API", version="0.1.0")
app.state.settings = TrelloSettings.from_env()


def get_settings(request: Request) -> TrelloSettings:
    """Return the settings built at startup. Tests override this dependency."""

    return request.app.state.settings


@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict:
    """Health check endpoint to verify that the service is running."""

    return {"status": "ok"}


@app.get("/api/trello-sessions")
async def trello_sessions(
    request: Request,
    settings: TrelloSettings = Depends(get_settings),
) -> JSONResponse:
    """Return the sessions of the configured Trello list, ordered by due date."""

    # Generate a correlation id so all logs for this request can be tied
    # together across the flow and the Trello service calls.
    request_id = generate_request_id()
    request.state.request_id = request_id

    log_info("Received sessions request", request_id=request_id)

    try:
        sessions = await fetch_trello_sessions(settings, request_id=request_id)
    except TrelloSessionsError as exc:
        return JSONResponse(status_code=exc.status_code, content=present_error(exc))
    except Exception as exc:  # noqa: BLE001
        log_error(
            "Internal error while fetching Trello sessions",
            request_id=request_id,
            error=repr(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=present_unexpected_error(exc),
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=present_sessions(sessions))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for uncaught exceptions.

    Ensures the service returns a 500 JSON error rather than crashing, and
    logs the error together with any request_id associated with the request.
    """

    request_id = getattr(request.state, "request_id", None)
    log_error("Unhandled exception", request_id=request_id, error=str(exc))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=present_unexpected_error(exc),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3000")))
