# backend/laundry_pos/app.py
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import sys
from laundry_pos.core.config import settings
from laundry_pos.models.user_model import User
from laundry_pos.models.customer_model import Customer
from laundry_pos.models.supplier_model import Supplier
from laundry_pos.models.item_model import Item
from laundry_pos.models.item_transaction_model import ItemTransaction
from laundry_pos.models.stock_transaction_model import StockTransaction
from laundry_pos.models.sales_transaction_model import SalesTransaction
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from laundry_pos.api.api_v1.router import router

DOCUMENT_MODELS = [
    User,
    Customer,
    Supplier,
    Item,
    ItemTransaction,
    StockTransaction,
    SalesTransaction
]

logging.getLogger("pymongo").setLevel(logging.WARNING)

log_handlers = [logging.StreamHandler(sys.stdout)]
if settings.LOG_FILE:
    log_handlers.append(logging.FileHandler(settings.LOG_FILE))

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=log_handlers
)

logger = logging.getLogger(__name__)

async def init_database(client: AsyncIOMotorClient) -> None:
    """Bind every document model to the configured database"""
    await init_beanie(
        database=client[settings.MONGO_DB_NAME],
        document_models=DOCUMENT_MODELS
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown events
    """
    client = None

    # Startup
    try:
        logger.info("Starting Laundry POS application...")
        if settings.uses_default_secret:
            logger.warning("JWT_SECRET is not set, tokens are signed with the built-in default secret")

        logger.info("Connecting to MongoDB...")
        # Every storage call fails after MONGO_TIMEOUT_MS instead of hanging
        client = AsyncIOMotorClient(
            settings.MONGO_CONNECTION_STRING,
            serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
            timeoutMS=settings.MONGO_TIMEOUT_MS
        )

        # Test the connection
        await client.admin.command('ping')
        logger.info("MongoDB connection successful")

        await init_database(client)
        app.state.mongo_client = client

        logger.info("Beanie ODM initialized successfully")
        logger.info(f"Application started successfully on {settings.PROJECT_NAME}")

    except Exception as e:
        logger.error(f"Failed to start application: {str(e)}")
        if client:
            client.close()
        raise

    yield

    # Shutdown
    logger.info("Shutting down application...")
    client.close()
    logger.info("Disconnected from MongoDB")

# Create FastAPI app with lifespan
app = FastAPI(
    title=settings.PROJECT_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG,
    description="Laundry POS - point-of-sale backend API",
    version="1.0.0"
)

# CORS configuration
origins = [
    "http://127.0.0.1:5500",
    "http://127.0.0.1:5502",
    "https://apkclaundry.github.io"
]

# Add configured CORS origins
origins.extend(settings.cors_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Health check endpoint
@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    client = getattr(request.app.state, "mongo_client", None)
    try:
        # Test database connection
        if client:
            await client.admin.command('ping')
            db_status = "connected"
        else:
            db_status = "disconnected"

        return {
            "status": "healthy",
            "database": db_status,
            "application": settings.PROJECT_NAME,
            "version": "1.0.0"
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        raise HTTPException(status_code=503, detail="Service unavailable")

@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }

# Include API router
app.include_router(router, prefix=settings.API_PREFIX)

# Every error leaves the API as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid input on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid input"}
    )

@app.exception_handler(PyMongoError)
async def database_exception_handler(request: Request, exc: PyMongoError):
    logger.error(f"Database error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"}
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred. Please try again later."}
    )
