from sqlmodel import Session, create_engine
from settings import DATABASE_URL, DATABASE_ECHO


# SQLite connections are shared with FastAPI's worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, connect_args=connect_args)


def get_session():
    """Yield a database session for the duration of a request."""
    with Session(engine) as session:
        yield session
