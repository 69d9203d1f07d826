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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./glowtasks.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    # JSON document from the file-backed version, imported once into an empty database
    LEGACY_DATA_FILE = data.get("LEGACY_DATA_FILE", "")

    # Outbound mail: environment variables win over env.yaml
    SMTP_HOST = os.getenv("SMTP_HOST", data.get("SMTP_HOST", ""))
    SMTP_PORT = int(os.getenv("SMTP_PORT", data.get("SMTP_PORT", 587)))
    SMTP_USER = os.getenv("SMTP_USER", data.get("SMTP_USER", ""))
    SMTP_PASS = os.getenv("SMTP_PASS", data.get("SMTP_PASS", ""))
    SMTP_FROM = os.getenv("SMTP_FROM", data.get("SMTP_FROM", "no-reply@example.com"))
    SMTP_TIMEOUT = data.get("SMTP_TIMEOUT", 20)
