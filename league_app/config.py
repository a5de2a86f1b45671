import os

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./league.db")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
