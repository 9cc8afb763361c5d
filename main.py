import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.config import LOG_LEVEL, PORT
from app.database import init_db
from app.exceptions import FileProxyError, file_proxy_error_handler
from app.routers import file, gemini

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Metadata store ready")
    yield


app = FastAPI(title="Gemini File Proxy", version="1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(FileProxyError, file_proxy_error_handler)


@app.get("/")
def read_root():
    """
    Root endpoint that provides basic API information.
    """
    return {"name": "Gemini File Proxy", "version": "1.0", "status": "active"}


app.include_router(file.router)
app.include_router(gemini.router)

if __name__ == "__main__":
    logger.info(f"App listening on PORT: {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
