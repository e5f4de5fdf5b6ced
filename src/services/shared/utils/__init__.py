from .api import api_handler as api_handler
from .api import get_caller as get_caller
from .api import parse_body as parse_body
from .api import path_param as path_param
from .api import require_role as require_role
from .http_response import api_response as api_response
from .validators import to_decimal as to_decimal
