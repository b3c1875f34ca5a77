import logging
from pydantic_settings import BaseSettings

from .constants.constants import *

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Analysis Defaults
    gc_window_size: int = DEFAULT_GC_WINDOW_SIZE
    default_input_type: str = "dna"
    default_reading_frame: int = 0
    default_notation: str = "three"
    default_sequence: str = SAMPLE_SEQUENCES["Insulin Signal Peptide"][0]

    # UI Limits
    max_sequence_length: int = 100000
    page_title: str = "DNA/RNA Translator"

    log_level: str = "INFO"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        if self.gc_window_size < 1:
            raise ValueError("GC_WINDOW_SIZE must be at least 1. Please fix it in your .env file.")

        if self.default_reading_frame not in READING_FRAMES:
            raise ValueError(
                f"DEFAULT_READING_FRAME must be one of {READING_FRAMES}. Please fix it in your .env file."
            )

        if self.default_input_type not in UI_INPUT_TYPE_LABELS:
            raise ValueError(f"DEFAULT_INPUT_TYPE must be one of {list(UI_INPUT_TYPE_LABELS)}.")

        if self.default_notation not in UI_NOTATION_LABELS:
            raise ValueError(f"DEFAULT_NOTATION must be one of {list(UI_NOTATION_LABELS)}.")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "allow",
    }


settings = Settings()
