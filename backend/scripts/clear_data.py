# backend/scripts/clear_data.py
import sys
import os

# --- Path Setup ---
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

# --- Database & Repository Imports ---
from faqaas.config import get_settings
from faqaas.database.connection import build_engine, build_session_factory, init_db
from faqaas.errors import StorageError
from faqaas.repository import SQLFAQRepository


def clear_database_tables() -> int:
    """Deletes all FAQ texts and FAQs, then rebuilds the (now empty) search index."""
    print("--- Clearing Database Tables ---")
    engine = build_engine(get_settings().DATABASE_URL)
    init_db(engine)
    repository = SQLFAQRepository(build_session_factory(engine))

    try:
        count = len(repository.all_faqs())
        repository.clear_db()
        repository.update_search_index()
    except StorageError as e:
        print(f"An error occurred while clearing the database: {e}")
        return 1

    print(f"Deleted {count} FAQs and their texts.")
    print("--- Database tables cleared successfully. ---")
    return 0


if __name__ == "__main__":
    sys.exit(clear_database_tables())
