from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Project Scheduler API"
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    MAX_SCHEDULE_TASKS: int = 10000
    SCHEDULER_DEDUPE_DEPENDENCIES: bool = True
    SCHEDULER_REPORT_CYCLE_MEMBERS: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
