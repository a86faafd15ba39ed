from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from order_notifier.core.settings import get_app_settings

SQLALCHEMY_DATABASE_URL = get_app_settings().database_url

_connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=_connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base for the store tables read by the notifier
Base = declarative_base()

