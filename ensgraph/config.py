from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List

# Get the repository root directory (parent of ensgraph directory)
REPO_ROOT = Path(__file__).parent.parent.absolute()

class Settings(BaseSettings):
    """Application settings."""

    # API settings
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = True

    # Version and environment
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Name resolution provider (mainnet JSON-RPC)
    ETH_RPC_URL: str = "https://ethereum-rpc.publicnode.com"
    PRIMARY_TLD: str = "eth"
    SUPPORTED_TLDS: List[str] = ["eth", "xyz", "luxe", "kred", "art", "club"]
    EXPLORER_BASE_URL: str = "https://etherscan.io/address/"

    # Relationship store
    DATABASE_URL: str = f"sqlite:///{REPO_ROOT / 'storage' / 'ensgraph.db'}"
    RELATIONSHIPS_API_URL: str = "http://localhost:8000"
    HTTP_TIMEOUT: float = 30.0

    class Config:
        env_file = ".env"

settings = Settings()
