from sqlalchemy.orm import Session
from users_api.data.models.user import UserModel
from users_api.repos.user_repo import UserRepo
from users_api.domain.schemas import UserCreate, UserRead
from users_api.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        created = self.repo.create_user(UserModel(name=payload.name))
        logger.info(f"Created user {created.id}")
        return UserRead.model_validate(created)

    def list_users(self) -> list[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]
