# src/amplitude_event/configs/config.py
import logging
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

import yaml

from amplitude_event.configs.settings import get_settings
from amplitude_event.schemas.known_fields import FieldType, KnownFieldTable

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration for amplitude_event.
    """

    # This points to src/amplitude_event/configs/
    CONFIG_DIR = Path(__file__).parent.resolve()

    KNOWN_FIELDS_PATH = CONFIG_DIR / "known_fields.yaml"

    @classmethod
    def get_known_fields_path(cls) -> Path:
        """Returns the known-field table path, honouring the settings override."""
        return Path(get_settings().KNOWN_FIELDS_PATH).resolve()

    @classmethod
    @lru_cache
    def load_known_fields(cls, path: Optional[Path] = None) -> Mapping[str, FieldType]:
        """
        Loads the known-field table as a read-only ``name -> FieldType`` mapping.

        Raises FileNotFoundError when the file is missing and
        pydantic.ValidationError when its content is malformed.
        """
        path = Path(path or cls.get_known_fields_path())
        if not path.exists():
            raise FileNotFoundError(f"Missing known-field table at {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        table = KnownFieldTable.model_validate(raw)
        logger.info("Loaded %d known fields from %s", len(table.fields), path)
        return table.as_mapping()
