import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("BOOKSTORE_APP_NAME", "Bookstore Inventory management")
    log_level: str = os.getenv("BOOKSTORE_LOG_LEVEL", "WARNING")

    # Validation
    # Off by default: authors are accepted as given, only books are checked.
    validate_authors: bool = os.getenv("BOOKSTORE_VALIDATE_AUTHORS", "False").lower() in ("true", "1", "yes")


settings = Settings()
