"""Basic Authentication credential holder."""
import base64
import threading
from typing import Dict, Optional

from requests.auth import AuthBase


class BasicAuthCredentials(AuthBase):
    """
    Stores a username/password pair and derives the Basic-Auth token.
    
    The token is recomputed whenever the credentials are rotated. Access is
    guarded by a lock so that a call started after ``set_authorization``
    always sees the new token. Instances can be passed as ``auth=`` to
    ``requests``.
    """
    
    def __init__(self, username: Optional[str] = None, password: Optional[str] = None):
        self._lock = threading.Lock()
        self._token = ""
        if username is not None:
            self.set_authorization(username, password or "")
    
    def set_authorization(self, username: str, password: str) -> None:
        """Stores credentials, replacing any previous pair."""
        raw = f"{username}:{password}".encode("utf-8")
        token = base64.b64encode(raw).decode("ascii")
        with self._lock:
            self._token = token
    
    def get_authorization_token(self) -> str:
        """Gets the current token, empty when no credentials were set."""
        with self._lock:
            return self._token
    
    @property
    def authorization_token(self) -> str:
        return self.get_authorization_token()
    
    @property
    def is_set(self) -> bool:
        return bool(self.get_authorization_token())
    
    def authorization_header(self) -> Dict[str, str]:
        """Builds the ``Authorization`` header for a request."""
        return {"Authorization": f"Basic {self.get_authorization_token()}"}
    
    def __call__(self, request):
        request.headers.update(self.authorization_header())
        return request
    
    def __repr__(self) -> str:
        return f"BasicAuthCredentials(is_set={self.is_set})"
