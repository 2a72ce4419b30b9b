from fastapi import FastAPI

from .error_handlers import register_error_handlers
from .routes import exercise, home

app = FastAPI(title="excatalog")

register_error_handlers(app)

app.include_router(home.router)
app.include_router(exercise.router)
