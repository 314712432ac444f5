import logging
from dataclasses import asdict
from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .. import __version__
from ..engine import QuoteRequest
from ..engine import reference
from ..presentation import catalog_frame, display_totals
from .state import engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fleet Builder API",
    description="Live price quotes for the Fleet Builder form",
    version=__version__,
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CalcRequest(BaseModel):
    """Form selections as posted by the builder; every field is optional and untyped."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    region_key: Any = Field(None, validation_alias=AliasChoices("regionKey", "region_key", "region"))
    service_key: Any = Field(None, validation_alias=AliasChoices("serviceKey", "service_key", "service"))
    insurance_key: Any = Field(None, validation_alias=AliasChoices("insuranceKey", "insurance_key", "insurance"))
    delivery_key: Any = Field(None, validation_alias=AliasChoices("deliveryKey", "delivery_key", "delivery"))
    vehicles: Any = None
    start_date: Any = Field(None, validation_alias=AliasChoices("startDate", "start_date"))
    end_date: Any = Field(None, validation_alias=AliasChoices("endDate", "end_date"))

    def to_request(self) -> QuoteRequest:
        return QuoteRequest.from_dict(self.model_dump(include=set(type(self).model_fields)))


@app.get("/")
async def root():
    return {"status": "online", "message": "Fleet Builder API Active"}


@app.post("/calculate")
async def calculate_quote(payload: Any = Body(None)):
    """
    Price the form selections.

    The body is read leniently (snake_case or camelCase keys, any value
    types, even a non-object body); unknown selections fall back to
    defaults instead of failing.
    """
    try:
        if isinstance(payload, dict):
            request = CalcRequest.model_validate(payload).to_request()
        else:
            request = QuoteRequest()
        result = engine.calculate(request)
        body = jsonable_encoder(result.to_dict())
        body["display"] = display_totals(result)
        return body
    except Exception as e:
        logger.exception("Quote calculation failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/catalog")
async def get_catalog(search: Optional[str] = None, region: Optional[str] = None, service: Optional[str] = None):
    try:
        df = catalog_frame(region_key=region, service_key=service)
        if search:
            mask = (
                df.index.str.contains(search, case=False, regex=False) |
                df['Label'].str.contains(search, case=False, regex=False)
            )
            df = df[mask]
        return df.to_dict(orient="index")
    except Exception as e:
        logger.exception("Catalog lookup failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/reference")
async def get_reference():
    return {
        "regions": [asdict(r) for r in reference.REGIONS],
        "service_levels": [asdict(s) for s in reference.SERVICE_LEVELS],
        "insurance": [asdict(i) for i in reference.INSURANCE_TIERS],
        "delivery": [asdict(d) for d in reference.DELIVERY_MODES],
        "vehicle_types": [asdict(v) for v in reference.VEHICLE_TYPES],
        "defaults": {
            "region": reference.DEFAULT_REGION.key,
            "service": reference.DEFAULT_SERVICE_LEVEL.key,
            "insurance": reference.DEFAULT_INSURANCE_TIER.key,
            "delivery": reference.DEFAULT_DELIVERY_MODE.key,
        },
    }


@app.get("/system/status")
async def get_status():
    settings = engine.settings
    return {
        "engine_active": True,
        "version": __version__,
        "currency": settings.currency,
        "default_rental_days": settings.default_rental_days,
        "max_quantity": settings.max_quantity,
        "vehicle_types": len(reference.VEHICLE_TYPES),
    }
