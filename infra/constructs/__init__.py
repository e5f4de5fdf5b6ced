from .api import Api as Api
from .database import Database as Database
from .deployment import Deployment as Deployment
from .events import Events as Events
from .functions import Functions as Functions
from .layers import Layers as Layers
from .observability import Observability as Observability
