#!/usr/bin/env python
"""
db_setup.py

Script to create the PostgreSQL database and user for the blog API and
then create its tables from the SQLAlchemy models.
It reads database credentials from a .env file located at the project root.

Required .env variables:
  DB_HOST
  DB_PORT
  DB_SUPERUSER
  DB_SUPERUSER_PASSWORD
  DB_USER
  DB_PASSWORD
  DB_NAME

Usage:
  python scripts/db_setup.py
"""
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
import psycopg2
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT
from sqlalchemy import create_engine

logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
logger = logging.getLogger("db_setup")

# Load environment variables from .env at project root
dotenv_path = Path(__file__).resolve().parent.parent / '.env'
load_dotenv(dotenv_path)

# Database configuration from env
DB_HOST = os.getenv('DB_HOST', '127.0.0.1')
DB_PORT = os.getenv('DB_PORT', '5432')
SUPERUSER = os.getenv('DB_SUPERUSER', 'postgres')
SUPERUSER_PASSWORD = os.getenv('DB_SUPERUSER_PASSWORD')
DB_USER = os.getenv('DB_USER')
DB_PASSWORD = os.getenv('DB_PASSWORD')
DB_NAME = os.getenv('DB_NAME', 'blog')


def setup_database():
    """Create the application user and database if they do not exist yet."""
    logger.info("Connecting to PostgreSQL as %s", SUPERUSER)
    try:
        conn = psycopg2.connect(
            dbname='postgres',
            user=SUPERUSER,
            password=SUPERUSER_PASSWORD,
            host=DB_HOST,
            port=DB_PORT
        )
    except psycopg2.Error as e:
        logger.error("Could not connect to PostgreSQL: %s", e)
        return False

    conn.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
    cur = conn.cursor()
    try:
        try:
            cur.execute(f"CREATE USER {DB_USER} WITH PASSWORD %s;", (DB_PASSWORD,))
            logger.info("User '%s' created.", DB_USER)
        except psycopg2.errors.DuplicateObject:
            logger.info("User '%s' already exists.", DB_USER)

        cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (DB_NAME,))
        if cur.fetchone():
            logger.info("Database '%s' already exists.", DB_NAME)
        else:
            cur.execute(f'CREATE DATABASE "{DB_NAME}" WITH OWNER = {DB_USER};')
            logger.info("Database '%s' created.", DB_NAME)

        cur.execute(f'GRANT ALL PRIVILEGES ON DATABASE "{DB_NAME}" TO {DB_USER};')
        return True
    except psycopg2.Error as e:
        logger.error("Error in database setup: %s", e)
        return False
    finally:
        cur.close()
        conn.close()


def create_tables():
    """Create all database tables."""
    # Ensure the backend package is importable
    backend_path = str(Path(__file__).resolve().parent.parent / 'backend')
    if backend_path not in sys.path:
        sys.path.insert(0, backend_path)

    from app.db.models import Base  # Importing the package registers every model

    db_url = f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    logger.info("Creating tables in postgresql://%s:***@%s:%s/%s", DB_USER, DB_HOST, DB_PORT, DB_NAME)
    engine = create_engine(db_url)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()
    logger.info("Tables created successfully!")
    return True


if __name__ == '__main__':
    if not all([SUPERUSER_PASSWORD, DB_USER, DB_PASSWORD]):
        logger.error("Missing one of DB_SUPERUSER_PASSWORD, DB_USER, or DB_PASSWORD in .env")
        sys.exit(1)

    if not setup_database():
        logger.error("Failed to setup database. Please check your PostgreSQL connection and credentials.")
        sys.exit(1)
    create_tables()
    logger.info("Database setup completed successfully!")
