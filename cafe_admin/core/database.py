"""
Database engine and declarative base
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Build the engine; SQLite connections are shared with the worker threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=True
    )
