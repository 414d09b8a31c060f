from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    # App
    APP_NAME: str = os.environ.get("APP_NAME", "Objetos REST Demo")

    # Remote objects collection
    API_BASE_URL: str = os.environ.get("API_BASE_URL", "https://api.restful-api.dev/objects")
    # Known record fetched at startup as a connectivity check.
    DEMO_OBJECT_ID: str = os.environ.get("DEMO_OBJECT_ID", "2")

    # Where the products to create come from: excel, paste or literal.
    INPUT_SOURCE: str = os.environ.get("INPUT_SOURCE", "excel")

    # Excel input
    EXCEL_IMPORT_PATH: str = os.environ.get("EXCEL_IMPORT_PATH", "Data for POST.xlsx")
    # Empty means the first worksheet.
    EXCEL_WORKSHEET_NAME: str = os.environ.get("EXCEL_WORKSHEET_NAME", "")

    # When set, only the created product with this name goes through PUT/PATCH/DELETE.
    SEARCH_NAME: str = os.environ.get("SEARCH_NAME", "")

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        base = str(self.API_BASE_URL or "").strip().rstrip("/")
        object.__setattr__(self, "API_BASE_URL", base)

        source = str(self.INPUT_SOURCE or "excel").strip().lower() or "excel"
        object.__setattr__(self, "INPUT_SOURCE", source)

        object.__setattr__(self, "SEARCH_NAME", str(self.SEARCH_NAME or "").strip())
        object.__setattr__(self, "EXCEL_WORKSHEET_NAME", str(self.EXCEL_WORKSHEET_NAME or "").strip())
        object.__setattr__(self, "LOG_LEVEL", str(self.LOG_LEVEL or "INFO").strip().upper() or "INFO")

    def excel_path(self) -> Path:
        # Relative paths are taken from the working directory the demo runs in.
        p = Path(self.EXCEL_IMPORT_PATH).expanduser()
        if not p.is_absolute():
            p = Path.cwd() / p
        return p.resolve()
