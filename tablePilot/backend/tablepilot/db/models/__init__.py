from tablepilot.db.database import Base

# Import models
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.tables import DiningTables
from tablepilot.db.models.bookings import Bookings, BookingStatus
from tablepilot.db.models.employees import Employees
from tablepilot.db.models.employee_vacations import EmployeeVacations
from tablepilot.db.models.employee_schedules import EmployeeWeeklySchedules, EmployeeSchedules

__all__ = [
    "Base",
    # Models
    "Businesses",
    "DiningTables",
    "Bookings",
    "Employees",
    "EmployeeVacations",
    "EmployeeWeeklySchedules",
    "EmployeeSchedules",
    # Enums
    "BookingStatus",
]
