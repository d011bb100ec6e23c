"""Create any missing tables in the configured database. Existing tables are left as they are."""
from jobportal.config import settings
from jobportal.database import Database
from jobportal.logging_config import setup_logging


def main():
    setup_logging()
    database = Database(settings.database_url).open()
    try:
        created = database.ensure_tables_exist()
    finally:
        database.close()
    print(f"DB table check complete: created {len(created)} missing table(s).")


if __name__ == "__main__":
    main()
