"""Heuristic configuration loading.

Heuristics are declared in a YAML document:

    heuristics:
      - name: Mapper Memory
        class: mapper_memory
        params:
          memory_ratio_severity: "0.6, 0.5, 0.4, 0.3"
          container_memory_severity: "1.1, 1.5, 2.0, 2.5"

Params are handed to the heuristic as a flat string to string mapping.
"""
import logging
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

import yaml

logger = logging.getLogger(__name__)

MAPPER_MEMORY = "mapper_memory"
REDUCER_MEMORY = "reducer_memory"
KNOWN_HEURISTIC_CLASSES = (MAPPER_MEMORY, REDUCER_MEMORY)


@dataclass(frozen=True)
class HeuristicConfigurationData:
    """Name, implementation and params of one configured heuristic."""

    heuristic_name: str
    class_name: str
    params: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeuristicConfigurationData":
        class_name = data.get("class")
        if class_name not in KNOWN_HEURISTIC_CLASSES:
            raise ValueError(
                f"Unknown heuristic class {class_name!r}, "
                f"expected one of {', '.join(KNOWN_HEURISTIC_CLASSES)}"
            )
        params = data.get("params") or {}
        if not isinstance(params, dict):
            raise ValueError(f"params of heuristic {class_name} must be a mapping")
        return cls(
            heuristic_name=str(data.get("name") or class_name),
            class_name=class_name,
            # YAML may type "2048" or 0.5 as numbers; params are always strings
            params={str(k): str(v) for k, v in params.items() if v is not None},
        )


def default_heuristic_configuration() -> List[HeuristicConfigurationData]:
    return [
        HeuristicConfigurationData("Mapper Memory", MAPPER_MEMORY),
        HeuristicConfigurationData("Reducer Memory", REDUCER_MEMORY),
    ]


def parse_heuristic_configuration(
    document: Optional[Dict[str, Any]],
) -> List[HeuristicConfigurationData]:
    """Build configuration entries from an already parsed YAML document."""
    if not isinstance(document, dict) or not isinstance(
        document.get("heuristics"), list
    ):
        raise ValueError("Heuristic configuration must contain a 'heuristics' list")
    return [HeuristicConfigurationData.from_dict(item) for item in document["heuristics"]]


def load_heuristic_configuration(
    path: Optional[Union[str, Path]] = None,
) -> List[HeuristicConfigurationData]:
    """
    Load heuristic configuration from a YAML file.

    Falls back to the built-in mapper and reducer memory heuristics, with
    default thresholds, when no path is given or the file does not exist.
    """
    if path is None:
        return default_heuristic_configuration()

    conf_path = Path(path)
    if not conf_path.exists():
        logger.warning(
            f"Heuristic configuration {conf_path} not found, using built-in defaults"
        )
        return default_heuristic_configuration()

    with conf_path.open() as f:
        document = yaml.safe_load(f)
    heuristics = parse_heuristic_configuration(document)
    logger.info(f"Loaded {len(heuristics)} heuristics from {conf_path}")
    return heuristics
