# config.py
import os
from dotenv import load_dotenv

load_dotenv(override=False)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# App
SERVICE_NAME = "AI Meeting Summarizer"
SERVICE_VERSION = "1.0.0"
ENVIRONMENT = os.getenv("ENVIRONMENT", "production").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Groq (OpenAI-compatible) completion provider
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
GROQ_TIMEOUT_SECONDS = float(os.getenv("GROQ_TIMEOUT_SECONDS", 60))
SUMMARY_TEMPERATURE = float(os.getenv("SUMMARY_TEMPERATURE", 0.3))
SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", 1024))

# SMTP relay
EMAIL_HOST = os.getenv("EMAIL_HOST")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", 587))
EMAIL_USER = os.getenv("EMAIL_USER")
EMAIL_PASS = os.getenv("EMAIL_PASS")
EMAIL_SECURE = _flag("EMAIL_SECURE")
EMAIL_TLS_VERIFY = _flag("EMAIL_TLS_VERIFY")  # off by default, the relay uses a self-signed cert
EMAIL_TIMEOUT_SECONDS = float(os.getenv("EMAIL_TIMEOUT_SECONDS", 30))
EMAIL_SENDER_NAME = os.getenv("EMAIL_SENDER_NAME", "Meeting Summarizer")

# Uploads
UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(os.getcwd(), "uploads"))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", 5 * 1024 * 1024))
ALLOWED_EXTENSIONS = (".txt", ".text", ".md")

# Terminal client
SUMMARIZER_API_URL = os.getenv("SUMMARIZER_API_URL", "http://localhost:8000/api")


def is_development() -> bool:
    return ENVIRONMENT == "development"
