from fastapi import Depends

from app.core.config import Settings, settings
from app.utils.rcpch_client import CalculationClient, RcpchClient


def get_settings() -> Settings:
    return settings


def get_calculation_client(settings: Settings = Depends(get_settings)) -> CalculationClient:
    return RcpchClient(
        api_url=settings.RCPCH_API_URL,
        api_key=settings.RCPCH_API_KEY,
        timeout=settings.RCPCH_TIMEOUT,
    )
