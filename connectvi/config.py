from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "ConnectVI Transit Engine"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8080"]
    LOG_LEVEL: str = "INFO"
    
    # Live position simulation
    SIMULATION_ENABLED: bool = True
    SIMULATION_TICK_SECONDS: float = 5.0
    SIMULATION_SEED: Optional[int] = None
    POSITION_JITTER_DEGREES: float = 0.001
    SPEED_JITTER: float = 10.0
    MIN_SPEED: float = 5.0
    MAX_SPEED: float = 35.0
    
    # Search
    SEARCH_RESULT_LIMIT: int = 10
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
