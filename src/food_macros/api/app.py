"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_macros.api.models import MacroData, MacroResponse, VolumeRequest
from food_macros.app_logging import configure_logging
from food_macros.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _format_validation_error(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/v1/calculate-macros",
        response_model=MacroResponse,
        response_model_exclude_none=True,
    )
    def calculate_macros(body: VolumeRequest, request: Request) -> MacroResponse:
        """Convert estimated food volumes into macro totals."""
        state_container: AppContainer = request.app.state.container
        items = [volume.to_domain() for volume in body.data.volumes]
        results = state_container.macro_service.calculate(items)
        logger.info(
            "Calculated macros: frame_id=%s items=%s found=%s",
            body.data.frame_id,
            len(results),
            sum(1 for result in results if result.found),
        )
        return MacroResponse(data=[MacroData.from_result(result) for result in results])

    return app


def _format_validation_error(exc: RequestValidationError) -> str:
    """Render validation errors as a single readable message."""
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"
