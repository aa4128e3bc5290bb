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
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    IS_DEVELOPMENT = ENVIRONMENT == "development"
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./dingdong.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    SESSION_TTL_MINUTES = int(data.get("SESSION_TTL_MINUTES", 15))
    SESSION_ID_HEADER = data.get("SESSION_ID_HEADER", "session-id")
    SESSION_TOKEN_HEADER = data.get("SESSION_TOKEN_HEADER", "session-token")
    SESSION_ID_COOKIE = data.get("SESSION_ID_COOKIE", "dingdong_session_id")
    SESSION_TOKEN_COOKIE = data.get("SESSION_TOKEN_COOKIE", "dingdong_session_token")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    LOGIN_RATE_LIMIT_MAX_REQUESTS = int(data.get("LOGIN_RATE_LIMIT_MAX_REQUESTS", 10))
    LOGIN_RATE_LIMIT_WINDOW_SECONDS = int(data.get("LOGIN_RATE_LIMIT_WINDOW_SECONDS", 60))
    DEFAULT_LEASE_ID = int(data.get("DEFAULT_LEASE_ID", 2))
    DEFAULT_UNIT_ID = int(data.get("DEFAULT_UNIT_ID", 3))
