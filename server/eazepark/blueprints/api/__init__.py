from flask import Blueprint

api_bp = Blueprint("api", __name__, url_prefix="/api")

# Import routes
from . import bookings
from . import health
