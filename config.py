import json
from pathlib import Path

# ---------------- Config (config.json ao lado do script) ----------------
CONFIG_PATH = Path(__file__).resolve().with_name("config.json")

def load_config(path: Path = CONFIG_PATH) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}

def save_config(cfg: dict, path: Path = CONFIG_PATH) -> None:
    path.write_text(json.dumps(cfg, ensure_ascii=False, indent=2), encoding="utf-8")
