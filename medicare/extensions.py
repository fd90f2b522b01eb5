"""Flask extension instances shared across the application."""
from __future__ import annotations

from flask_bcrypt import Bcrypt
from flask_cors import CORS

bcrypt = Bcrypt()
cors = CORS()
