from sales_purchase.database.base import Base
from sales_purchase.database.engine import engine
from sales_purchase.database.session import SessionLocal, build_session_factory, get_db

__all__ = ["Base", "SessionLocal", "build_session_factory", "engine", "get_db"]
