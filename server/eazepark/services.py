"""
Request handlers for signup, login and parking bookings.

Every handler is a plain function taking the decoded JSON payload plus the
collaborators it needs (database session, password hasher, geocoder) and
returning the new row id. Failures are raised as ``ServiceError`` subclasses.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from server.eazepark.errors import (
    AuthError,
    DuplicateError,
    InternalError,
    MissingReferenceError,
    NotFoundError,
)
from server.eazepark.models import ParkingBooking, User
from server.eazepark.utils import (
    parse_id,
    parse_latitude,
    parse_longitude,
    password_bytes,
    require_fields,
)

logger = logging.getLogger(__name__)

SIGNUP_FIELDS = ("name", "email", "phone", "password")
LOGIN_FIELDS = ("emailOrPhone", "password")
BOOKING_FIELDS = ("userId", "userLat", "userLon", "parkingId", "parkingLat", "parkingLon")


def signup(data, session, hasher):
    require_fields(data, SIGNUP_FIELDS, unstripped=("password",))
    name = str(data["name"]).strip()
    email = str(data["email"]).strip()
    phone = str(data["phone"]).strip()
    password = password_bytes(data["password"])

    try:
        existing = session.query(User).filter(
            or_(User.email == email, User.phone == phone)
        ).first()
        if existing:
            raise DuplicateError("Email or phone already exists")

        hashed_password = hasher.generate_password_hash(password).decode("utf-8")
        user = User(name=name, email=email, phone=phone, password=hashed_password)
        session.add(user)
        session.commit()

    except IntegrityError:
        # another signup with the same email/phone committed first
        session.rollback()
        raise DuplicateError("Email or phone already exists")

    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Database error (signup)")
        raise InternalError("Error creating user") from e

    logger.info("User created with id %s", user.id)
    return user.id


def login(data, session, hasher):
    require_fields(
        data, LOGIN_FIELDS,
        message="Email/Phone and Password are required",
        unstripped=("password",),
    )
    identifier = str(data["emailOrPhone"]).strip()
    password = password_bytes(data["password"])

    try:
        user = session.query(User).filter(
            or_(User.email == identifier, User.phone == identifier)
        ).first()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Database error (login)")
        raise InternalError("Database error", details=str(e)) from e

    if user is None:
        raise NotFoundError("Account not found. Please sign up!")

    if not user.password:
        logger.error("User %s has no stored password", user.id)
        raise InternalError("User password is missing in database")

    try:
        matches = hasher.check_password_hash(user.password, password)
    except ValueError:
        # stored value is not a bcrypt hash
        logger.error("User %s has a malformed password hash", user.id)
        raise InternalError("User password is missing in database")

    if not matches:
        raise AuthError("Incorrect password")

    logger.info("User logged in successfully: %s", user.id)
    return user.id


def resolve_locations(geocoder, *points):
    """Reverse geocode each (lat, lon) pair concurrently, preserving order."""
    with ThreadPoolExecutor(max_workers=len(points)) as pool:
        futures = [pool.submit(geocoder.location_name, lat, lon) for lat, lon in points]
        return [future.result() for future in futures]


def book_parking(data, session, geocoder):
    require_fields(data, BOOKING_FIELDS)
    logger.info("Received userId: %s", data["userId"])

    user_id = parse_id(data["userId"], "userId")
    user_lat = parse_latitude(data["userLat"], "userLat")
    user_lon = parse_longitude(data["userLon"], "userLon")
    parking_lat = parse_latitude(data["parkingLat"], "parkingLat")
    parking_lon = parse_longitude(data["parkingLon"], "parkingLon")
    parking_id = str(data["parkingId"]).strip()

    try:
        user = session.get(User, user_id)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Database error (booking user check)")
        raise InternalError("Internal server error") from e

    if user is None:
        raise MissingReferenceError("User does not exist!")

    user_location, parking_location = resolve_locations(
        geocoder,
        (user_lat, user_lon),
        (parking_lat, parking_lon),
    )

    booking = ParkingBooking(
        user_id=user_id,
        user_location=user_location,
        parking_id=parking_id,
        parking_location=parking_location,
    )
    try:
        session.add(booking)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Error processing booking")
        raise InternalError("Internal server error") from e

    logger.info("Booking %s created for user %s", booking.id, user_id)
    return booking.id
