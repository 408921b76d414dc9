from dataclasses import dataclass
from typing import Any, Mapping, Optional

from std2.configparser import hydrate
from std2.graphlib import merge
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from .consts import CONFIG_YML

EnumTable = Mapping[str, int]
EnumNamespace = Mapping[str, EnumTable]


@dataclass(frozen=True)
class Settings:
    aliases: Mapping[str, Mapping[str, str]]
    editor: EnumNamespace


def load(user_config: Optional[Mapping[str, Any]] = None) -> Settings:
    yml = safe_load(CONFIG_YML.read_text("UTF-8"))
    u_conf = hydrate(user_config or {})
    merged = merge(yml, u_conf, replace=True)
    settings = new_decoder[Settings](Settings)(merged)
    return settings
