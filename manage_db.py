#!/usr/bin/env python3
"""
Database management script for the leads backend.
Creates and resets the submission, template and vault tables.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from sqlalchemy import inspect

from app.config import settings
from app.infrastructure.db import models  # noqa: F401
from app.infrastructure.db.database import Base, engine, create_all_tables


def init_database():
    """Create any missing tables."""
    print(f"Creating tables on {engine.url.render_as_string(hide_password=True)}...")
    create_all_tables()
    print("Tables ready.")


def reset_database():
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Resetting database...")
        Base.metadata.drop_all(bind=engine)
        create_all_tables()
        print("Database reset.")
    else:
        print("Database reset cancelled.")


def show_tables():
    """List tables present in the database."""
    tables = inspect(engine).get_table_names()
    if not tables:
        print("No tables found. Run 'init' first.")
        return
    for table in tables:
        print(f"  {table}")


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init           - Create missing tables")
        print("  reset          - Reset database (WARNING: drops all data)")
        print("  tables         - List tables")
        print(f"Database: {settings.database_url}")
        return

    command_name = sys.argv[1]

    if command_name == "init":
        init_database()
    elif command_name == "reset":
        reset_database()
    elif command_name == "tables":
        show_tables()
    else:
        print(f"Unknown command: {command_name}")


if __name__ == "__main__":
    main()
