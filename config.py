import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("DB_USER", "root")
    password = quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    name = os.getenv("DB_NAME", "eazepark")
    return f"mysql+pymysql://{user}:{password}@{host}/{name}"


class Config:
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))

    PORT = int(os.getenv("PORT", 5000))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # bcrypt cost factor
    BCRYPT_LOG_ROUNDS = int(os.getenv("BCRYPT_LOG_ROUNDS", 10))

    GEOCODER_URL = os.getenv("GEOCODER_URL", "https://nominatim.openstreetmap.org")
    GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "eazepark-backend")
    GEOCODER_TIMEOUT = float(os.getenv("GEOCODER_TIMEOUT", 10))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS", "https://eazepark.vercel.app,http://localhost:3000"
        ).split(",")
        if origin.strip()
    ]


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    BCRYPT_LOG_ROUNDS = 4
    GEOCODER_URL = "http://geocoder.test"
    GEOCODER_TIMEOUT = 1
