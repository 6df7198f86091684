from functools import lru_cache
from pathlib import Path
import yaml

TEXTS_PATH = Path(__file__).resolve().parent.parent / "texts.yml"


@lru_cache(maxsize=1)
def load_texts() -> dict:
    with open(TEXTS_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_text(section: str, key: str, default: str, **kwargs) -> str:
    """Look up a user-facing string from texts.yml, falling back to ``default``."""
    template = load_texts().get(section, {}).get(key) or default
    return template.format(**kwargs) if kwargs else template
