from .user import User
from .booking import ParkingBooking
