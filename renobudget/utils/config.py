
import os
from dataclasses import dataclass

@dataclass
class Settings:
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "5002"))
    # input bounds enforced before the calculator runs
    HOME_VALUE_MIN: float = float(os.getenv("HOME_VALUE_MIN", "50000"))
    HOME_VALUE_MAX: float = float(os.getenv("HOME_VALUE_MAX", "10000000"))
    YEARLY_INCOME_MIN: float = float(os.getenv("YEARLY_INCOME_MIN", "8000"))
    YEARLY_INCOME_MAX: float = float(os.getenv("YEARLY_INCOME_MAX", "10000000"))

settings = Settings()
