import logging

from fastapi import FastAPI
from tablepilot.core.config import settings
from tablepilot.api.routes import businesses, tables, bookings, employees, employee_vacations, schedules

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="TablePilot API", version="0.1.0")

app.include_router(businesses.router, prefix="/api/v1")
app.include_router(tables.router, prefix="/api/v1")
app.include_router(bookings.router, prefix="/api/v1")
app.include_router(employees.router, prefix="/api/v1")
app.include_router(employee_vacations.router, prefix="/api/v1")
app.include_router(schedules.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
