from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Database Configuration
    # Backs the SQL settings/content/history stores
    DATABASE_URL: str = "sqlite:///./workflow_extensions.db"

    # Where the admin variables live: "memory" for dev/tests, "sql" for the variables table
    SETTINGS_BACKEND: Literal["memory", "sql"] = "memory"

    # Where content items and their state history are read from: "memory" serves
    # the sample content, "sql" reads the node and workflow_node_history tables
    CONTENT_BACKEND: Literal["memory", "sql"] = "memory"

    # Exposed to token replacement as [site-name]
    SITE_NAME: str = "Workflow Extensions"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
