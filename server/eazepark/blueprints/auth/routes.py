from . import auth_bp
from flask import request, jsonify
from server.eazepark.extensions import db, bcrypt
from server.eazepark import services
from server.eazepark.blueprints import json_payload


@auth_bp.route('/signup', methods=['POST'])
def signup():
    user_id = services.signup(json_payload(request), db.session, bcrypt)
    return jsonify({"message": "Signup successful!", "userId": user_id}), 200


@auth_bp.route('/login', methods=['POST'])
def login():
    user_id = services.login(json_payload(request), db.session, bcrypt)
    return jsonify({"message": "Login successful", "userId": user_id}), 200
