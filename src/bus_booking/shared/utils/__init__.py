from .http_client import bearer as bearer
from .http_client import create_http_client as create_http_client
from .http_client import error_message as error_message
from .validators import to_amount as to_amount
