import logging

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .errors import FormatterError, UnsupportedIntrinsicError, UnsupportedValueMappingError
from .models.schemas import CreateRequestPayload, CreateResponsePayload
from .service.create import create_code_connect

logger = logging.getLogger(settings.SERVICE_NAME + ".api")

router = APIRouter(prefix=f"/{settings.API_VERSION}")


@router.post(
    "/create",
    response_model=CreateResponsePayload,
    summary="Generate a Code Connect file",
    description="Generates a Code Connect file binding a design component to a code component and writes it to disk.",
)
async def create(payload: CreateRequestPayload) -> CreateResponsePayload:
    """
    Generate and write a Code Connect file.

    An existing destination file is reported in `messages` with level ERROR
    rather than as an HTTP error.
    """
    logger.info(f"Received create request for component {payload.component.normalized_name}")

    try:
        return await run_in_threadpool(create_code_connect, payload)
    except (UnsupportedIntrinsicError, UnsupportedValueMappingError) as e:
        logger.error(f"Invalid prop mapping: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except FormatterError as e:
        logger.error(f"Error formatting generated file: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error formatting generated file: {str(e)}"
        )


@router.get(
    "/healthz",
    response_model=dict,
    summary="Health check endpoint",
    description="Returns the health status of the Code Connect service.",
)
async def health_check() -> dict:
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "formatter": settings.FORMATTER,
    }


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application for the Code Connect service.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Code Connect Generator Service",
        description="Generates Code Connect files from design component definitions.",
        version="0.1.0",
        docs_url=f"/{settings.API_VERSION}/docs",
        redoc_url=f"/{settings.API_VERSION}/redoc",
        openapi_url=f"/{settings.API_VERSION}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Adjust for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, tags=["Code Connect"])
    return app


# Create the FastAPI app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Running Code Connect API directly")
    uvicorn.run(
        "code_connect.api:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=True,
    )
