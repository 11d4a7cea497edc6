from unittest.mock import MagicMock


# Stand-in for a requests.Response carrying a status code and a JSON body
def make_response(status_code: int = 200, payload=None, bad_json: bool = False) -> MagicMock:
    r = MagicMock()
    r.status_code = status_code
    if bad_json:
        r.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        r.json.return_value = payload
    return r
