# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here ensures the
# Base metadata knows about every table when Alembic or create_all runs.

from .base_class import Base

from .models.user_models import User, UserRole
from .models.classroom_models import Classroom, StudentClassroom, Task, Meeting
from .models.progress_models import TimeEntry, Report, ReportStatus, ReportType
