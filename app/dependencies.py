from fastapi import Request

from app.config import Settings
from app.context import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_settings(request: Request) -> Settings:
    return get_context(request).settings


def get_db(request: Request):
    db = get_context(request).database.session()
    try:
        yield db
    finally:
        db.close()
