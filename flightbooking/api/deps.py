"""
Dependency FastAPI: costruisce la pipeline con le sue dipendenze esplicite.

Nei test si sovrascrivono con app.dependency_overrides.
"""
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flightbooking.config import settings
from flightbooking.db.database import get_session
from flightbooking.db.records import FlightRecordStore, SqlFlightRecordStore
from flightbooking.services.flight_fetcher import FlightFetcher
from flightbooking.services.location_validator import LocationValidator
from flightbooking.services.providers.tequila import TequilaClient
from flightbooking.services.recorder import SearchRecorder
from flightbooking.services.search_orchestrator import SearchOrchestrator

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_tequila_client() -> TequilaClient:
    return TequilaClient(
        api_key=settings.tequila_api_key,
        base_url=settings.tequila_base_url,
        timeout=settings.http_timeout_seconds,
    )


def get_record_store(session: SessionDep) -> FlightRecordStore:
    return SqlFlightRecordStore(session)


TequilaDep = Annotated[TequilaClient, Depends(get_tequila_client)]
RecordStoreDep = Annotated[FlightRecordStore, Depends(get_record_store)]


def get_orchestrator(tequila: TequilaDep, store: RecordStoreDep) -> SearchOrchestrator:
    return SearchOrchestrator(
        validator=LocationValidator(tequila),
        fetcher=FlightFetcher(tequila),
        recorder=SearchRecorder(store),
    )


OrchestratorDep = Annotated[SearchOrchestrator, Depends(get_orchestrator)]
