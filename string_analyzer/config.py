import os
from dotenv import load_dotenv

# Load environment variables only for local development
if os.path.exists(".env"):
    load_dotenv()

# ------------------------------------------------------------------------------
# STORE
# ------------------------------------------------------------------------------
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").strip().lower()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./strings.db")

# Railway sometimes provides the URL in a slightly different variable
if DATABASE_URL.startswith("mysql://"):
    # SQLAlchemy expects "mysql+pymysql://"
    DATABASE_URL = DATABASE_URL.replace("mysql://", "mysql+pymysql://", 1)

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
