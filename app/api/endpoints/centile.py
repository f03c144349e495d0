from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api import deps
from app.core.config import Settings
from app.schemas.centile import CentileRequest, CentileResponse, FieldConfig, FieldValuesResponse
from app.utils.centiles import handle
from app.utils.field_mapping import build_field_values
from app.utils.rcpch_client import CalculationClient

router = APIRouter()


# Plain "def" routes: the growth API calls block, so FastAPI runs these in its threadpool
@router.post("", response_model=CentileResponse)
def calculate_centiles(
        data: CentileRequest,
        settings: Settings = Depends(deps.get_settings),
        client: CalculationClient = Depends(deps.get_calculation_client),
):
    status_code, response = handle(data, settings, client)
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


@router.post("/field-values", response_model=FieldValuesResponse)
def calculate_field_values(
        data: CentileRequest,
        settings: Settings = Depends(deps.get_settings),
        client: CalculationClient = Depends(deps.get_calculation_client),
):
    status_code, response = handle(data, settings, client)
    field_values = build_field_values(response, settings)
    content = FieldValuesResponse(success=response.success, results=field_values, error=response.error)
    return JSONResponse(status_code=status_code, content=content.model_dump(mode="json"))


@router.get("/config", response_model=FieldConfig)
def get_field_config(settings: Settings = Depends(deps.get_settings)):
    return FieldConfig(
        api_url=settings.RCPCH_API_URL,
        inputs=settings.input_fields(),
        outputs=settings.output_fields(),
        date_formats={
            "dob": settings.DOB_FORMAT,
            "measurement_date": settings.MEASUREMENT_DATE_FORMAT,
        },
    )
