from . import api_bp
from flask import current_app, request, jsonify
from server.eazepark.extensions import db
from server.eazepark import services
from server.eazepark.blueprints import json_payload


@api_bp.route("/book-parking", methods=["POST"])
def book_parking():
    """Record a booking annotated with reverse-geocoded location names"""
    geocoder = current_app.extensions["geocoder"]
    booking_id = services.book_parking(json_payload(request), db.session, geocoder)
    return jsonify({"message": "Booking successful!", "bookingId": booking_id}), 200
