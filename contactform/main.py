#run it with uvicorn contactform.main:app --reload  (or: contactform-server)
import asyncio
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from contactform.api.api_router import api_router
from contactform.api.deps import get_sender
from contactform.core.config import get_settings
from contactform.core.contact_handler import METHOD_NOT_ALLOWED_MESSAGE, json_response
from contactform.core.cors import get_cors_headers
from contactform.core.logging_config import configure_logging

# Load environment variables from .env file
load_dotenv()

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize components on startup, release them on shutdown."""
    from contactform.db.init_db import initialize_database
    from contactform.db.mongo import reset_client

    logger.info("🚀 Starting contact form backend...")
    try:
        if await initialize_database():
            logger.info("✅ Database initialization completed successfully")
        else:
            logger.warning("⚠️ Database initialization completed with warnings")
    except Exception as e:
        # Continue startup even if DB init fails; saves are best effort
        logger.error(f"❌ Database initialization failed: {str(e)}")

    # SMTP check runs in the background and never gates requests
    verify_task = asyncio.create_task(get_sender().verify_connection())

    yield

    if not verify_task.done():
        verify_task.cancel()
    reset_client()
    logger.info("MongoDB connections closed successfully")


app = FastAPI(title="Contact Form Backend", version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def cors_policy(request: Request, call_next):
    """Answer preflight requests and decorate every response with CORS headers."""
    cors_headers = get_cors_headers(request.headers.get("origin"))
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=cors_headers)

    response = await call_next(request)
    for name, value in cors_headers.items():
        response.headers.setdefault(name, value)
    return response


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Give verbs no route accepts the same 405 body as the contact handler."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)

    result = json_response(405, {"success": False, "message": METHOD_NOT_ALLOWED_MESSAGE},
                           get_cors_headers(request.headers.get("origin")))
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)


app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
