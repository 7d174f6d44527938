import json

from buildsphere.services.exceptions import InvalidRequestBodyError

JSON = "application/json"
TEXT = "text/plain; charset=utf-8"

OK = "200 OK"
CREATED = "201 Created"
NO_CONTENT = "204 No Content"
BAD_REQUEST = "400 Bad Request"
NOT_FOUND = "404 Not Found"


def get_request_data(environ) -> dict:
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        data = json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise InvalidRequestBodyError("Invalid or missing JSON body.")
    if not isinstance(data, dict):
        raise InvalidRequestBodyError("Request body must be a JSON object.")
    return data


def json_response(status: str, payload):
    return status, json.dumps(payload), JSON


def empty_response(status: str):
    # 본문이 없는 응답에는 Content-Type을 붙이지 않는다
    return status, "", None
