# users_api/api/__init__.py
from fastapi import FastAPI
from users_api.api.errors import register_error_handlers
from users_api.api.routers import users
from users_api.api.routers.health import router as health_router
from users_api.data.database import Store

def create_app(store: Store) -> FastAPI:
    app = FastAPI(title="Users Service", version="1.0.0")
    app.state.store = store
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(users.router)
    return app
