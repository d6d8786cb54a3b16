from sqlalchemy import select
from sqlalchemy.orm import Session
from users_api.data.models.user import UserModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[UserModel]:
        return list(self.db.scalars(select(UserModel)))

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
