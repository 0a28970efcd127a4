"""
Persistence package. `storage` is the process-wide DBStorage; the application
factory calls storage.reload() with the configured DATABASE_URL.
"""
from models.db_storage import DBStorage

storage = DBStorage()
