from pathlib import Path

TOP_LEVEL = Path(__file__).resolve(strict=True).parent

_CONF_DIR = TOP_LEVEL / "config"
_ART_DIR = TOP_LEVEL / "artifacts"

CONFIG_YML = _CONF_DIR / "defaults.yml"
LSP_ARTIFACTS = _ART_DIR / "lsp.json"
