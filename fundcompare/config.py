"""Flask configuration objects. Environment variables prefixed FUNDCOMPARE_ override these."""


class Config:
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    CURRENCY_SYMBOL = "₪"
    LOG_LEVEL = "INFO"


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
