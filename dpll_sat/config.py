"""
Solver configuration.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from omegaconf import DictConfig, OmegaConf


@dataclass
class SolverConfig:
    """
    Options for a single solve.

    Attributes:
        complete_assignment: Bind variables the search left unset to default_value.
        default_value: Value used for those variables.
        record_trace: Record one trace line per search event.
        max_steps: Interrupt the search after this many frames (None = unlimited).
    """
    complete_assignment: bool = True
    default_value: bool = False
    record_trace: bool = False
    max_steps: Optional[int] = None


def load_config(source: Union[None, str, Mapping[str, Any], DictConfig] = None) -> SolverConfig:
    """
    Build a SolverConfig, merging overrides over the defaults.

    Args:
        source: A YAML file path, a mapping, a DictConfig, or None for defaults.

    Returns:
        A validated SolverConfig.
    """
    schema = OmegaConf.structured(SolverConfig)
    if source is None:
        overrides = OmegaConf.create({})
    elif isinstance(source, str):
        overrides = OmegaConf.load(source)
    elif isinstance(source, DictConfig):
        overrides = source
    else:
        overrides = OmegaConf.create(dict(source))
    merged = OmegaConf.merge(schema, overrides)
    return OmegaConf.to_object(merged)
