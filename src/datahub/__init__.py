from .loader import load_dated_averages, load_observations, load_platform_averages
from .records import DatedAverage, Observation, PlatformAverage

__all__ = [
    "DatedAverage",
    "Observation",
    "PlatformAverage",
    "load_dated_averages",
    "load_observations",
    "load_platform_averages",
]
