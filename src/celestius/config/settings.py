from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    app_title: str = os.getenv("CELESTIUS_APP_TITLE", "Celestius GPA Calculator")
    brand_name: str = os.getenv("CELESTIUS_BRAND_NAME", "Celestius")
    brand_url: str = os.getenv("CELESTIUS_BRAND_URL", "https://cit-celestius.vercel.app/")

    web_mode: bool = os.getenv("CELESTIUS_WEB", "0") == "1"
    port: int = int(os.getenv("PORT", "8550"))
    log_level: str = os.getenv("CELESTIUS_LOG_LEVEL", "INFO").upper()

    cors_allowed_origins: tuple[str, ...] = _split_csv(
        os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )


settings = Settings()
