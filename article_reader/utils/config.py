import os
import yaml
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DOTENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(DOTENV_PATH)

CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"
CONFIG_ENV_VAR = "ARTICLE_READER_CONFIG"
PROXY_ENV_VAR = "ARTICLE_READER_PROXY_URL"


class ExtractionSettings(BaseModel):
    min_paragraph_length: int = Field(
        20, ge=0,
        description="A paragraph must have strictly more characters than this."
    )
    min_cell_length: int = Field(
        1000, ge=0,
        description="Smallest text length of a table cell accepted as content."
    )
    max_glyph_length: int = Field(
        2, ge=0,
        description="Longest run of bullets/punctuation treated as a stray glyph."
    )


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    # scrapy is chatty at INFO
    for name in ("scrapy", "twisted", "filelock"):
        logging.getLogger(name).setLevel(
            logging.DEBUG if debug else logging.WARNING
        )


def resolve_config_path(config_path: Optional[str] = None) -> Path:
    if config_path:
        return Path(config_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return CONFIG_PATH


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    path = resolve_config_path(config_path)
    with open(path, "r") as f:
        yaml_config = yaml.safe_load(f) or {}

    proxy_url = os.getenv(PROXY_ENV_VAR)
    if proxy_url is not None:
        yaml_config["proxy_url"] = proxy_url or None

    # Setup logging based on config
    setup_logging(debug=yaml_config.get("debug", False))

    return yaml_config


def load_settings(config: Optional[Dict[str, Any]] = None) -> ExtractionSettings:
    """Build extraction thresholds from the `extraction` config section."""
    if config is None:
        return ExtractionSettings()
    return ExtractionSettings(**(config.get("extraction") or {}))
