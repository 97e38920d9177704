import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./onboarding.db")
    AUTO_CREATE_SCHEMA = bool(data.get("AUTO_CREATE_SCHEMA", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Credentials
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Ephemeral state lifetimes
    SIGNUP_DRAFT_TTL_MINUTES = int(data.get("SIGNUP_DRAFT_TTL_MINUTES", 120))
    SESSION_TTL_HOURS = int(data.get("SESSION_TTL_HOURS", 24))

    # Order pricing (excl. VAT)
    STARTUP_FEE_EXCL_VAT = float(data.get("STARTUP_FEE_EXCL_VAT", 199.0))
    EXTRA_PLATE_PRICE_EXCL_VAT = float(data.get("EXTRA_PLATE_PRICE_EXCL_VAT", 49.0))
    MONTHLY_FEE_EXCL_VAT = float(data.get("MONTHLY_FEE_EXCL_VAT", 29.0))
    EXTRA_PLATES_MAX = int(data.get("EXTRA_PLATES_MAX", 99))

    # Client redirects
    SIGNUP_REDIRECT_URL = data.get("SIGNUP_REDIRECT_URL", "/login")
    LOGIN_REDIRECT_URL = data.get("LOGIN_REDIRECT_URL", "/app")
