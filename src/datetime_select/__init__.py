"""Interactive date, time and date-time selection for the terminal."""

import logging

from datetime_select.errors import ConfigurationError, InternalConsistencyError
from datetime_select.models import DateType, SelectConfig
from datetime_select.select import DateTimeSelect

__all__ = [
    "ConfigurationError",
    "DateTimeSelect",
    "DateType",
    "InternalConsistencyError",
    "SelectConfig",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
