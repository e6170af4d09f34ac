from typing import Optional
from fastapi import FastAPI
from app.core.config import Settings, settings
from app.core.handlers import UTF8JSONResponse, register_exception_handlers
from app.core.logging import setup_logging
from app.api.v1.router import api_router
from app.api.static import StaticFileServer, build_static_router
from app.services.student.student import StudentService


def create_app(
    service: Optional[StudentService] = None,
    config: Settings = settings,
) -> FastAPI:
    """
    Build the application around one StudentService.

    Pass a service to share its store with another front-end (the console);
    otherwise a fresh, empty one is created.
    """
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.APP_VERSION,
        debug=config.DEBUG,
        default_response_class=UTF8JSONResponse,
    )
    app.state.student_service = service if service is not None else StudentService()

    register_exception_handlers(app)

    # API routes first, the static catch-all must come last
    app.include_router(api_router, prefix=config.API_PREFIX)

    @app.get("/app-config.json", include_in_schema=False)
    def frontend_config():
        """
        Settings the bundled front-end needs to find the API
        """
        return {"apiPrefix": config.API_PREFIX}

    app.include_router(build_static_router(StaticFileServer(config.STATIC_DIR, config.INDEX_FILE)))

    return app


app = create_app()
