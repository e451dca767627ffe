# /app/services/database_helpers/user_repository_sql.py

from typing import Dict, Optional
from sqlalchemy.orm import Session

from app.db.models.user_models import User, UserRole


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_external_id(self, external_id: str) -> Optional[User]:
        """Looks a user up by the identity provider's subject claim."""
        return self.db.query(User).filter(User.external_id == external_id).first()

    def add_user(self, record: Dict) -> User:
        new_user = User(**record)
        self.db.add(new_user)
        self.db.commit()
        self.db.refresh(new_user)
        return new_user

    def set_user_role(self, user_id: int, role: UserRole) -> Optional[User]:
        db_user = self.get_user_by_id(user_id)
        if db_user:
            db_user.role = role
            self.db.commit()
            self.db.refresh(db_user)
        return db_user
