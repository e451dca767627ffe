# /app/services/classroom_helpers/crud.py

import uuid
from typing import Dict, Optional

from loguru import logger

from ...core.config import DEFAULT_OJT_HOURS
from ...core.errors import NotFound
from ...db.models.classroom_models import Classroom
from ...models import classroom_model
from ..database_service import DatabaseService


def _generate_join_code() -> str:
    return uuid.uuid4().hex[:8].upper()


def create_classroom(class_data: classroom_model.ClassroomCreate, professor_id: int, db: DatabaseService) -> Classroom:
    """Creates a classroom owned by `professor_id` with a fresh join code."""
    record = {
        "name": class_data.name,
        "description": class_data.description,
        "professor_id": professor_id,
        "ojt_hours": class_data.ojtHours or DEFAULT_OJT_HOURS,
        "start_date": class_data.startDate,
        "end_date": class_data.endDate,
        "is_active": class_data.isActive if class_data.isActive is not None else True,
        "join_code": _generate_join_code(),
    }
    new_classroom = db.add_classroom(record)
    logger.info(f"Classroom created: {new_classroom.name} (ID: {new_classroom.id})")
    return new_classroom


def build_update_record(class_update: classroom_model.ClassroomUpdate) -> Dict:
    """
    Translates a PUT payload into column values. Omitted name/description are
    left alone; everything else falls back to its default.
    """
    record = {
        "start_date": class_update.startDate,
        "end_date": class_update.endDate,
        "ojt_hours": class_update.ojtHours or DEFAULT_OJT_HOURS,
        "is_active": class_update.isActive if class_update.isActive is not None else True,
    }
    if class_update.name is not None:
        record["name"] = class_update.name
    if class_update.description is not None:
        record["description"] = class_update.description
    return record


def update_classroom(
    classroom_id: int,
    class_update: classroom_model.ClassroomUpdate,
    professor_id: int,
    db: DatabaseService,
) -> Classroom:
    updated = db.update_classroom(classroom_id, professor_id, build_update_record(class_update))
    if updated is None:
        raise NotFound("Classroom not found or you don't have permission to modify it")
    return updated


def delete_classroom(classroom_id: int, professor_id: int, db: DatabaseService) -> None:
    logger.info(f"Attempting to delete classroom {classroom_id} and all related records")
    if not db.delete_classroom_cascade(classroom_id, professor_id):
        raise NotFound("Classroom not found or you don't have permission to delete it")
    logger.info(f"Successfully deleted classroom {classroom_id}")


def get_owned_classroom(classroom_id: int, professor_id: int, db: DatabaseService) -> Optional[Classroom]:
    return db.get_classroom_by_id(classroom_id, professor_id)
