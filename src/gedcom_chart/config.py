import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_chart.yml"

class GCConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.output = data.get("output", {})
        self.debug = data.get("debug", False)

def load_config(path: Path = CONFIG_PATH) -> 'GCConfig':
    # Installed copies ship without the repository config directory.
    if not path.exists():
        return GCConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GCConfig(data)

_config_cache = None

def get_config() -> 'GCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
