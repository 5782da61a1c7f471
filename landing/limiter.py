from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared by every router so one in-memory counter backs app.state.limiter
limiter = Limiter(key_func=get_remote_address)
