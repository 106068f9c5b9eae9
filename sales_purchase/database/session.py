from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from sales_purchase.database.engine import engine


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


SessionLocal = build_session_factory(engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
