from .logger import logger, set_logger, set_log_level
from .setup_error import SetupError
from .validation_error import ValidationError
from .no_default_type_error import NoDefaultTypeError
from .special_values import UNKNOWN_TYPE_ID
