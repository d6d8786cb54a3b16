#all models imported here so SQLAlchemy registers them in Base.metadata

from users_api.data.models.user import UserModel

__all__ = ["UserModel"]
