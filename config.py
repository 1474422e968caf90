import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("CATALOG_DB_URL", "sqlite:///myshop.db")
STORAGE_KEY = os.getenv("CATALOG_STORAGE_KEY", "myshop_products")
TRACE_LOG_PATH = os.getenv("CATALOG_TRACE_LOG", "trace.log")
