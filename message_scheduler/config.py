from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Service
    service_name: str = "message-scheduler"
    debug: bool = False
    log_level: str = "INFO"

    # Identity (supplied by the upstream gateway)
    auth_enabled: bool = False  # Disable in development
    admin_group: str = "admin"
    dev_user_id: str = "dev-user"

    # Scheduling
    timezone: str = "UTC"  # Zone in which form dates and times are read

    # Data
    seed_demo_data: bool = False
    max_body_length: int = 4096

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
