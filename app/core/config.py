# /app/core/config.py

"""
Central runtime configuration for the OJT backend.

Values are read once at import time from the process environment. A local
`.env` file is loaded first so development setups do not need to export
anything by hand.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ojt.db")

# --- Identity Provider ---
# Tokens are issued by the external identity provider; we only verify them.
IDENTITY_PROVIDER_SECRET = os.getenv("IDENTITY_PROVIDER_SECRET", "change-me-in-production")
IDENTITY_PROVIDER_ALGORITHM = os.getenv("IDENTITY_PROVIDER_ALGORITHM", "HS256")
IDENTITY_PROVIDER_AUDIENCE = os.getenv("IDENTITY_PROVIDER_AUDIENCE") or None
IDENTITY_PROVIDER_ISSUER = os.getenv("IDENTITY_PROVIDER_ISSUER") or None

# --- Domain Defaults ---
DEFAULT_OJT_HOURS = int(os.getenv("DEFAULT_OJT_HOURS", "600"))
ROLE_SELECTION_PATH = "/role-selection"

# --- HTTP ---
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Dashboard Client ---
OJT_API_BASE_URL = os.getenv("OJT_API_BASE_URL", "http://localhost:8000")
OJT_API_TIMEOUT = float(os.getenv("OJT_API_TIMEOUT", "10"))
