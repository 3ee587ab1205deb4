"""Environment-driven settings for the subgraph filter."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "SUBGRAPH_FILTER_"

# undecodable bytes round-trip unchanged from input to output
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class FilterSettings:
    include_file: str = "include.txt"
    exclude_file: str = "exclude.txt"
    log_level: str = "WARNING"


def load_settings() -> FilterSettings:
    load_dotenv()
    defaults = FilterSettings()
    return FilterSettings(
        include_file=os.getenv(f"{ENV_PREFIX}INCLUDE_FILE", defaults.include_file),
        exclude_file=os.getenv(f"{ENV_PREFIX}EXCLUDE_FILE", defaults.exclude_file),
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
    )
