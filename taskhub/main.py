import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from taskhub import __version__  # noqa: E402
from taskhub.api.base import api_router  # noqa: E402
from taskhub.errors import register_exception_handlers  # noqa: E402

app = FastAPI(
    title="TaskHub Backend API",
    description="Backend API for TaskHub - task management with role-based visibility",
    version=__version__
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": "TaskHub Backend API",
        "docs": "/docs",
        "version": __version__
    }
