from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from drinkwithme.core.config import settings


def configure_sqlite(engine):
    """Let SQLAlchemy emit BEGIN so SAVEPOINTs nest inside one transaction."""

    @event.listens_for(engine, "connect")
    def _connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


is_sqlite = settings.DATABASE_URL.startswith("sqlite")
connect_args = {"check_same_thread": False} if is_sqlite else {}

engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, connect_args=connect_args)
if is_sqlite:
    configure_sqlite(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
