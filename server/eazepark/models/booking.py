from server.eazepark.extensions import db


class ParkingBooking(db.Model):
    __tablename__ = "ParkingBookings"

    id = db.Column(db.Integer, primary_key=True)
    # existence of the user is checked before insert, no FK constraint
    user_id = db.Column(db.Integer, nullable=False, index=True)
    user_location = db.Column(db.Text, nullable=False)
    parking_id = db.Column(db.String(255), nullable=False)
    parking_location = db.Column(db.Text, nullable=False)
