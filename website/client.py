import requests
from requests.auth import HTTPBasicAuth


class StudentAgesError(Exception):
    """Base class for anything that keeps the student list from rendering."""


class NetworkFailure(StudentAgesError):
    """The student API could not be reached."""


class ApiError(StudentAgesError):
    def __init__(self, status_code, message=None):
        self.status_code = status_code
        super().__init__(message or f"Student API answered with HTTP {status_code}")


class InvalidPayload(StudentAgesError):
    """The student API answered 200 but not with a list of {name, age} objects."""


def format_student_line(record):
    return f"{record['name']} ({record['age']})"


def _validate(payload):
    if not isinstance(payload, list):
        raise InvalidPayload("Expected a JSON array of students")
    students = []
    for item in payload:
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise InvalidPayload(f"Malformed student record: {item!r}")
        age = item.get("age")
        # ages arrive as strings; a bare integer is tolerated
        if isinstance(age, bool) or not isinstance(age, (str, int)):
            raise InvalidPayload(f"Malformed student record: {item!r}")
        students.append({"name": item["name"], "age": str(age)})
    return students


class StudentAgesClient:
    def __init__(self, api_url, username, password, timeout=5):
        self.api_url = api_url
        self.auth = HTTPBasicAuth(username, password)
        self.timeout = timeout

    def fetch(self):
        """
        GET the student list from the API.

        Returns a list of ``{"name": str, "age": str}``. Raises NetworkFailure,
        ApiError or InvalidPayload; never returns partial data.
        """
        try:
            resp = requests.get(
                self.api_url,
                auth=self.auth,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkFailure(f"Student API unreachable: {e}") from e

        if resp.status_code != 200:
            raise ApiError(resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            raise InvalidPayload("Student API did not return JSON") from e
        return _validate(payload)
