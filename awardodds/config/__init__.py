from .params import (
    CalibrationParams,
    RebalanceBand,
    RebalanceParams,
    SignalParams,
    WeightParams,
    EngineParams,
    DEFAULT_ENGINE_PARAMS,
    get_engine_params,
)
from .settings import LoggingSettings, Settings, load_settings

__all__ = [
    "CalibrationParams",
    "RebalanceBand",
    "RebalanceParams",
    "SignalParams",
    "WeightParams",
    "EngineParams",
    "DEFAULT_ENGINE_PARAMS",
    "get_engine_params",
    "LoggingSettings",
    "Settings",
    "load_settings",
]
