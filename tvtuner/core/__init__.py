"""Channel model and tuner registry."""

from .channels import BAND_RANGES, Band, Channel, InvalidFrequency, band_for_frequency
from .tuner import FACTORY_CHANNELS, DuplicateFrequencyPolicy, TunerRegistry

__all__ = [
    'BAND_RANGES', 'Band', 'Channel', 'InvalidFrequency', 'band_for_frequency',
    'FACTORY_CHANNELS', 'DuplicateFrequencyPolicy', 'TunerRegistry',
]
