from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from flightbooking.api.deps import OrchestratorDep, RecordStoreDep
from flightbooking.config import settings
from flightbooking.models.schemas import FlightRecordOut, SearchHeaderResult, SearchParams
from flightbooking.utils.dates import parse_external_date, to_external_date

router = APIRouter()

_DATE_PATTERN = r"^(\d{2}/\d{2}/\d{4}|\d{4}-\d{2}-\d{2})$"





"""
Endpoint medie voli.-----------------------------------------------------------------------------------

GET /api/v1/flights/avg
  ?flyFrom=OPO
  &flyTo=OPO,LIS
  &currency=EUR
  &dateFrom=01/06/2026
  &dateTo=07/06/2026
"""
@router.get("/avg", response_model=SearchHeaderResult)
async def flights_average(
    orchestrator: OrchestratorDep,
    fly_to: Annotated[str, Query(alias="flyTo", min_length=1, description="Due codici IATA separati da virgola")],
    date_from: Annotated[str, Query(alias="dateFrom", pattern=_DATE_PATTERN, description="Data minima (dd/mm/YYYY)")],
    date_to: Annotated[str, Query(alias="dateTo", pattern=_DATE_PATTERN, description="Data massima (dd/mm/YYYY)")],
    fly_from: Annotated[str, Query(alias="flyFrom", description="Codice IATA di partenza")] = "",
    currency: Annotated[str, Query(min_length=3, max_length=3, description="Valuta ISO 4217")] = settings.default_currency,
) -> SearchHeaderResult:

    #Validation area -------------------------------------------
    try:
        start = parse_external_date(date_from)
        end = parse_external_date(date_to)
    except ValueError:
        raise HTTPException(status_code=400, detail="dateFrom and dateTo must be valid dates (dd/mm/YYYY)")
    if start > end:
        raise HTTPException(status_code=400, detail="dateFrom must be <= dateTo")
    #Validation area -------------------------------------------

    params = SearchParams(
        fly_from=fly_from,
        fly_to=fly_to,
        currency=currency.upper(),
        date_from=to_external_date(start),
        date_to=to_external_date(end),
    )
    return await orchestrator.filter_flights(params)


@router.get("/records", response_model=list[FlightRecordOut])
async def list_records(
    store: RecordStoreDep,
    limit: Annotated[int, Query(ge=1, le=500, description="Numero massimo di record")] = settings.records_page_size,
) -> list[FlightRecordOut]:
    """Latest search records, newest first."""
    return await store.list_recent(limit)
