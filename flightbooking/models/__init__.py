# Importare tutti i modelli qui serve a "registrarli" con Base.
# SQLAlchemy deve conoscere tutte le tabelle prima di poter
# chiamare create_all() o generare migrazioni Alembic.
from flightbooking.models.flight_record import FlightRecord  # noqa: F401
