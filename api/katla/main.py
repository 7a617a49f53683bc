"""FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from katla.api import auth, hives, hive_sections, categories
from katla.core.config import settings
from katla.core.exceptions import register_exception_handlers
from katla.core.logging_config import configure_logging

configure_logging()

app = FastAPI(title="KatlaSport API", version="1.0.0")

# CORS for the Angular client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routes
app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(hives.router, prefix="/hives", tags=["hives"])
app.include_router(hive_sections.router, prefix="/sections", tags=["hive-sections"])
app.include_router(categories.router, prefix="/categories", tags=["categories"])


@app.get("/")
def read_root():
    return {"message": "KatlaSport API"}
