from .session_provider import InMemorySessionProvider as InMemorySessionProvider
from .session_provider import SessionProvider as SessionProvider
from .session_provider import UserSession as UserSession
