import hmac

from flask import Flask, jsonify, make_response, abort, request, current_app
from flask_httpauth import HTTPBasicAuth

from simple_api.settings import load_api_settings
from simple_api.database.student_store import StudentStore, DataUnavailable
from simple_api.database.simple_logger import AccessLogger

API_PREFIX = "/pozos/api/v1.0"

auth = HTTPBasicAuth()


@auth.verify_password
def verify_password(username, password):
    expected_user = current_app.config["API_USERNAME"]
    expected_password = current_app.config["API_PASSWORD"]
    if username is None or password is None:
        return None
    user_ok = hmac.compare_digest(username.encode("utf-8"), expected_user.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), expected_password.encode("utf-8"))
    if user_ok and password_ok:
        return username
    return None


@auth.error_handler
def unauthorized(status):
    print(f"[API] Authentication failed for {request.method} {request.path}")
    return make_response(jsonify({"error": "Unauthorized access"}), status)


def get_store():
    return current_app.extensions["student_store"]


def create_app(settings=None):
    settings = settings or load_api_settings()

    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.config["API_USERNAME"] = str(settings["username"])
    app.config["API_PASSWORD"] = str(settings["password"])
    app.config["STUDENT_AGE_FILE"] = settings["student_age_file"]
    app.extensions["student_store"] = StudentStore(settings["student_age_file"])
    app.extensions["access_logger"] = AccessLogger()

    @app.route(f"{API_PREFIX}/get_student_ages", methods=["GET"])
    @auth.login_required
    def get_student_ages():
        records = get_store().all()
        print(f"[API] Serving {len(records)} student records to {auth.current_user()}")
        return jsonify([StudentStore.to_wire(r) for r in records])

    @app.route(f"{API_PREFIX}/get_student_ages/<student_name>", methods=["GET"])
    @auth.login_required
    def get_student_age(student_name):
        record = get_store().get(student_name)
        if record is None:
            abort(404)
        return jsonify(StudentStore.to_wire(record))

    @app.errorhandler(DataUnavailable)
    def data_unavailable(error):
        print(f"[API] Student data unavailable: {error}")
        return make_response(jsonify({"error": "Student data unavailable"}), 500)

    @app.errorhandler(404)
    def not_found(error):
        return make_response(jsonify({"error": "Not found"}), 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return make_response(jsonify({"error": "Method not allowed"}), 405)

    @app.after_request
    def log_request(response):
        app.extensions["access_logger"].log(request, response.status_code, user=auth.current_user())
        print(f"[API] {request.method} {request.path} from {request.remote_addr} -> {response.status_code}")
        return response

    return app


def main():
    settings = load_api_settings()
    app = create_app(settings)
    print(f"Starting student API on port {settings['port']}...")
    print(f"Serving data from {settings['student_age_file']}")
    app.run(host=settings["host"], port=settings["port"], debug=settings["debug"])


if __name__ == "__main__":
    main()
