import uuid
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from tiksave.api import health, info, download, static
from tiksave.config.settings import config
from tiksave.core.logging import setup_logging, log_warning
from tiksave.i18n import i18n
from tiksave.infra.http import init_http_client, close_http_client
from tiksave.utils.locale import get_locale

setup_logging()

app = FastAPI(
    title=config.api.title,
    description=config.api.description,
    version=config.api.version,
    docs_url="/docs" if config.api.debug else None,
    redoc_url=None
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def assign_request_id(request: Request, call_next):
    request.state.request_id = uuid.uuid4().hex[:8]
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response

# Every failure leaves the API as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    locale = get_locale(request.headers.get("accept-language"))
    log_warning(request, f"Rejected request body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": i18n.get("error.invalid_request", locale=locale)}
    )

# Routes (static fallback must stay last)
app.include_router(health.router, tags=["Health"])
app.include_router(info.router, tags=["Info"])
app.include_router(download.router, tags=["Download"])
app.include_router(static.router)

@app.on_event("startup")
async def startup_event():
    init_http_client()

@app.on_event("shutdown")
async def shutdown_event():
    await close_http_client()

def run():
    """Console entry point"""
    uvicorn.run(app, host=config.server.host, port=config.server.port)

if __name__ == "__main__":
    run()
