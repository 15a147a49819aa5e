import logging

from ensgraph.config import settings
from ensgraph.db.init_db import reset_database

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print(f"Database: {settings.DATABASE_URL}")
    confirm = input("This will DELETE ALL RELATIONSHIPS in the database. Are you sure? (y/n): ")
    if confirm.lower() == 'y':
        reset_database()
        print("Database has been reset successfully!")
    else:
        print("Operation cancelled.")
