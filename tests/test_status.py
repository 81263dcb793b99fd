import pytest

from api_client_gen.generator.status import STATUS_NAMES, UNKNOWN, is_success, status_code, status_name

EXPECTED = {
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "NoContent",
    301: "MovedPermanently",
    302: "Found",
    304: "NotModified",
    307: "TemporaryRedirect",
    308: "PermanentRedirect",
    400: "BadRequest",
    401: "Unauthorized",
    402: "PaymentRequired",
    403: "Forbidden",
    404: "NotFound",
    405: "MethodNotAllowed",
    406: "NotAcceptable",
    408: "RequestTimeout",
    500: "InternalServerError",
    502: "BadGateway",
    503: "GatewayTimeout",
}


class TestStatusName:
    def test_table_is_complete(self):
        assert STATUS_NAMES == EXPECTED

    @pytest.mark.parametrize("code,name", sorted(EXPECTED.items()))
    def test_known_codes(self, code, name):
        assert status_name(code) == name
        assert status_name(str(code)) == name

    @pytest.mark.parametrize("code", [418, 999, 0, 407, 501, "418", "default", "", "2XX"])
    def test_unknown_codes(self, code):
        assert status_name(code) == UNKNOWN == "UNKNOWN"


class TestStatusCode:
    def test_parses_strings(self):
        assert status_code("404") == 404
        assert status_code(" 200 ") == 200

    def test_non_numeric(self):
        assert status_code("default") is None


class TestIsSuccess:
    @pytest.mark.parametrize("code", [200, "201", 204, 299])
    def test_2xx(self, code):
        assert is_success(code) is True

    @pytest.mark.parametrize("code", [199, 300, "404", 500, "default"])
    def test_other(self, code):
        assert is_success(code) is False
