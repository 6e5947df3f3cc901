# config.py
"""
Environment configuration for the LeaseKeeper backend.

Values are read once at import time from the process environment
(a local .env file is loaded first when present).
"""
import os

from dotenv import load_dotenv

# Load .env
load_dotenv()

# Entity store
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")  # memory, file, sql
STORAGE_PATH = os.getenv("STORAGE_PATH", os.path.join("data", "leasekeeper.json"))
STORAGE_INDENT = os.getenv("STORAGE_INDENT", "false").lower() == "true"

# SQL backend
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./leasekeeper.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# Notifications
NOTIFIER = os.getenv("NOTIFIER", "console")  # console, email, sms
BREVO_API_KEY = os.getenv("BREVO_API_KEY")
EMAIL_SENDER_NAME = os.getenv("EMAIL_SENDER_NAME", "LeaseKeeper")
EMAIL_SENDER_ADDRESS = os.getenv("EMAIL_SENDER_ADDRESS", "noreply@leasekeeper.local")

# Billing
INVOICE_NET_DAYS = int(os.getenv("INVOICE_NET_DAYS", "14"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")

# HTTP
CORS_ORIGINS = [origin for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin]
PORT = int(os.getenv("PORT", 10000))
