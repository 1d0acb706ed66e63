"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from http import HTTPStatus
from uuid import UUID

import httpx
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from calorie_hunter.api.models import (
    FoodEntryFormModel,
    FoodItemModel,
    LabelScanResponse,
    NutritionFactsModel,
    ParseLabelRequest,
    PrefillRequest,
    ScanUrlRequest,
)
from calorie_hunter.app_logging import configure_logging
from calorie_hunter.containers import AppContainer
from calorie_hunter.domain.foods import FoodEntryForm
from calorie_hunter.domain.labels import NutritionFacts
from calorie_hunter.services.food_entry import FoodEntryError, prefill
from calorie_hunter.services.label_parser import parse_nutrition_label
from calorie_hunter.services.label_scan import EmptyImageError, LabelScanResult


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/labels/parse")
    async def parse_label(
        payload: ParseLabelRequest, request: Request
    ) -> NutritionFactsModel:
        """Parse OCR text of a nutrition label."""
        state_container: AppContainer = request.app.state.container
        debug = payload.debug or state_container.label_parser.debug
        facts = parse_nutrition_label(payload.text, debug=debug)
        return _facts_model(facts)

    @app.post("/labels/scan")
    async def scan_label(request: Request) -> LabelScanResponse:
        """Run OCR on a raw label photo and parse it."""
        state_container: AppContainer = request.app.state.container
        content_type = request.headers.get("content-type", "")
        if content_type and not content_type.startswith("image/"):
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail="Expected an image body",
            )
        max_image_bytes = state_container.settings.max_image_bytes
        declared_length = request.headers.get("content-length", "")
        if declared_length.isdigit() and int(declared_length) > max_image_bytes:
            raise HTTPException(
                status_code=HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
                detail="Image too large",
            )
        image_bytes = await request.body()
        if not image_bytes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Empty image"
            )
        if len(image_bytes) > max_image_bytes:
            raise HTTPException(
                status_code=HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
                detail="Image too large",
            )
        try:
            result = await state_container.label_scan_service.scan(image_bytes)
        except Exception as exc:
            logger.exception("Label text recognition failed")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Text recognition failed",
            ) from exc
        return _scan_response(result)

    @app.post("/labels/scan-url")
    async def scan_label_url(
        payload: ScanUrlRequest, request: Request
    ) -> LabelScanResponse:
        """Download a label photo and parse it."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.label_scan_service.scan_url(payload.url)
        except httpx.HTTPError as exc:
            logger.warning("Label image download failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Image download failed",
            ) from exc
        except EmptyImageError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception("Label scan from URL failed", extra={"url": payload.url})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Text recognition failed",
            ) from exc
        return _scan_response(result)

    @app.post("/foods/prefill")
    async def prefill_food(payload: PrefillRequest) -> FoodEntryFormModel:
        """Merge parsed label values into a food-entry form."""
        form = FoodEntryForm(**payload.form.model_dump())
        facts = NutritionFacts(**payload.facts.model_dump())
        return FoodEntryFormModel(**asdict(prefill(form, facts)))

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, list[FoodItemModel]]:
        """Return stored foods."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.food_entry_service.list_foods()
        return {"foods": [FoodItemModel(**asdict(food)) for food in foods]}

    @app.post("/foods", status_code=status.HTTP_201_CREATED, response_model=None)
    async def add_food(
        payload: FoodEntryFormModel, request: Request
    ) -> FoodItemModel | JSONResponse:
        """Validate and store a manually entered food."""
        state_container: AppContainer = request.app.state.container
        try:
            food = state_container.food_entry_service.add_food(
                FoodEntryForm(**payload.model_dump())
            )
        except FoodEntryError as exc:
            return JSONResponse(
                status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
                content={"errors": exc.messages},
            )
        return FoodItemModel(**asdict(food))

    @app.delete("/foods/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def remove_food(food_id: UUID, request: Request) -> None:
        """Delete a stored food."""
        state_container: AppContainer = request.app.state.container
        if not state_container.food_entry_service.remove_food(food_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    return app


def _facts_model(facts: NutritionFacts) -> NutritionFactsModel:
    return NutritionFactsModel(**asdict(facts))


def _scan_response(result: LabelScanResult) -> LabelScanResponse:
    return LabelScanResponse(text=result.text, facts=_facts_model(result.facts))
