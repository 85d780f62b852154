import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_DATA_FILE = os.path.join("server", "data", "feedback.json")


class Settings(BaseModel):
    port: int = Field(default=3001)
    gemini_api_key: str = Field(default="")
    gemini_model: str = Field(default="gemini-1.5-flash")
    data_file: str = Field(default=DEFAULT_DATA_FILE)
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment, after loading a .env file if present."""
        load_dotenv()
        env = os.environ
        return cls(
            port=int(env.get("PORT") or 3001),
            gemini_api_key=env.get("GEMINI_API_KEY") or env.get("GOOGLE_API_KEY") or "",
            gemini_model=env.get("GEMINI_MODEL") or "gemini-1.5-flash",
            data_file=env.get("FEEDBACK_DATA_FILE") or DEFAULT_DATA_FILE,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
