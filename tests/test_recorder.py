from unittest.mock import AsyncMock, MagicMock

import pytest

from flightbooking.db.records import SqlFlightRecordStore
from flightbooking.models.flight_record import FlightRecord
from flightbooking.services.recorder import SearchRecorder


class TestSearchRecorder:

    async def test_record_fields(self, search_params, mock_store, fixed_now):
        recorder = SearchRecorder(mock_store, clock=lambda: fixed_now)

        saved = await recorder.record(search_params)

        mock_store.create.assert_awaited_once()
        record = mock_store.create.await_args.args[0]
        assert isinstance(record, FlightRecord)
        assert record.fly_to == "OPO,LIS"
        assert record.currency == "EUR"
        assert record.date_from == "01/06/2026"
        assert record.date_to == "07/06/2026"
        assert record.record_date_time == fixed_now
        assert saved.id == 1

    async def test_store_error_propagates(self, search_params):
        store = AsyncMock()
        store.create.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError, match="db down"):
            await SearchRecorder(store).record(search_params)


class TestSqlFlightRecordStore:

    async def test_create_commits_and_refreshes(self, fixed_now):
        session = AsyncMock()
        session.add = MagicMock()
        record = FlightRecord(
            fly_to="OPO,LIS", currency="EUR",
            date_from="01/06/2026", date_to="07/06/2026",
            record_date_time=fixed_now,
        )

        result = await SqlFlightRecordStore(session).create(record)

        session.add.assert_called_once_with(record)
        session.commit.assert_awaited_once()
        session.refresh.assert_awaited_once_with(record)
        assert result is record

    async def test_list_recent(self, fixed_now):
        record = FlightRecord(
            id=7, fly_to="OPO,LIS", currency="EUR",
            date_from="01/06/2026", date_to="07/06/2026",
            record_date_time=fixed_now,
        )
        session = AsyncMock()
        rows = MagicMock()
        rows.scalars.return_value.all.return_value = [record]
        session.execute.return_value = rows

        result = await SqlFlightRecordStore(session).list_recent(10)

        assert result == [record]
        session.execute.assert_awaited_once()
