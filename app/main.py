import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import logging
import sys
import time
from contextlib import asynccontextmanager
from .config.settings import get_settings
from .routers import relay, store
from .storage.memory_store import MemoryStore


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - [%(name)s] %(message)s - %(pathname)s:%(lineno)d",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)
logger = logging.getLogger(__name__)
access_logger = logging.getLogger("app.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The store lives exactly as long as the application
    app.state.store = MemoryStore()
    logger.info(f"Default upload target: {settings.default_target_url}")
    yield
    logger.info("Shutting down server...")


app = FastAPI(
    title="File Relay",
    description="Relays remote files to a document upload API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


@app.middleware("http")
async def access_log(request: Request, call_next):
    # "tiny" format: method path status length - response-time ms
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    length = response.headers.get("content-length", "-")
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {length} - {elapsed_ms:.3f} ms"
    )
    return response


app.include_router(relay.router)
app.include_router(store.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello world"


@app.get("/health")
async def health_check():
    logger.info("Health check request received")
    return {
        "status": "healthy",
        "logging_level": logging.getLogger().level,
    }


if __name__ == "__main__":
    logger.info(f"Server is running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
