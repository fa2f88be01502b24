from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Database settings
    database_url: str = "sqlite:///./bakery_catalog.db"
    
    # External user directory settings
    directory_base_url: str = "https://jsonplaceholder.typicode.com/users"
    directory_timeout_s: float = 10.0
    
    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Application settings
    debug: bool = False
    environment: str = "development"
    
    class Config:
        env_file = ".env"
        case_sensitive = False
    
    @property
    def directory_url(self) -> str:
        """Directory base URL without a trailing slash"""
        return self.directory_base_url.rstrip("/")


# Global settings instance
def get_settings() -> Settings:
    """Get application settings instance"""
    return Settings()
