import pytest
from pydantic import ValidationError as PydanticValidationError

from opensky_api import BoundingBox, Credentials, ValidationError
from opensky_api.decoding import decode_states
from opensky_api.models import STATE_VECTOR_FIELDS, StateVector


def test_bounding_box_rejects_inverted_axes():
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=50.0, max_lat=40.0, min_lon=5.0, max_lon=10.0)
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=40.0, max_lat=50.0, min_lon=10.0, max_lon=5.0)


def test_bounding_box_rejects_out_of_range_and_non_numbers():
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=-91.0, max_lat=0.0, min_lon=0.0, max_lon=1.0)
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=0.0, max_lat=1.0, min_lon=0.0, max_lon=181.0)
    with pytest.raises(ValidationError):
        BoundingBox(min_lat="0", max_lat=1.0, min_lon=0.0, max_lon=1.0)
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=float("nan"), max_lat=1.0, min_lon=0.0, max_lon=1.0)


def test_bounding_box_params_use_opensky_names():
    bbox = BoundingBox(min_lat=45.0, max_lat=47.0, min_lon=5.0, max_lon=10.0)

    assert bbox.to_params() == {"lamin": 45.0, "lomin": 5.0, "lamax": 47.0, "lomax": 10.0}


def test_bounding_box_around_point():
    bbox = BoundingBox.around(10.0, 20.0, radius_nm=60.0)

    assert bbox.min_lat == pytest.approx(9.0)
    assert bbox.max_lat == pytest.approx(11.0)
    assert bbox.min_lon == pytest.approx(20.0 - 1.0154, rel=1e-3)
    assert bbox.max_lon == pytest.approx(20.0 + 1.0154, rel=1e-3)


def test_bounding_box_around_pole_is_clamped():
    bbox = BoundingBox.around(89.9, 179.9, radius_nm=30.0)

    assert bbox.max_lat == 90.0
    assert bbox.max_lon == 180.0
    with pytest.raises(ValidationError):
        BoundingBox.around(0.0, 0.0, radius_nm=0)


def test_credentials_hide_secrets():
    creds = Credentials.basic("alice", "s3cret")

    assert creds.username == "alice"
    assert creds.password.get_secret_value() == "s3cret"
    assert "s3cret" not in repr(creds)
    assert not creds.is_bearer
    assert Credentials.bearer("tok").is_bearer


def test_credentials_need_exactly_one_mode():
    with pytest.raises(PydanticValidationError):
        Credentials(username="alice")
    with pytest.raises(PydanticValidationError):
        Credentials(username="alice", password="pw", token="tok")


def test_state_vector_is_immutable():
    row = ["3c6444", None, "Germany", None, 1680000001, None, None, None, True,
           None, None, None, None, None, None, False, 2]
    vector = StateVector.model_validate(row)

    with pytest.raises(PydanticValidationError):
        vector.icao24 = "000000"


def test_decode_keeps_every_field_in_order():
    row = ["3c6444", "DLH9LF  ", "Germany", 1680000000, 1680000001, 6.1, 50.2, 9639.3,
           False, 232.9, 98.3, -4.5, [1, 2], 9547.9, "7700", True, 3, 0]
    states = decode_states({"time": 1680000000, "states": [row]})
    vector = states.states[0]

    assert [getattr(vector, name) for name in STATE_VECTOR_FIELDS] == row


def test_integer_coordinates_are_accepted():
    row = ["3c6444", "DLH9LF  ", "Germany", 1680000000, 1680000001, 6, 50, 0,
           True, 0, 0, 0, None, None, None, False, 0]
    vector = decode_states({"time": 1680000000, "states": [row]}).states[0]

    assert vector.longitude == 6.0
    assert vector.baro_altitude == 0.0


@pytest.mark.parametrize(
    "build",
    [
        lambda: Credentials.bearer(""),
        lambda: Credentials.bearer("   "),
        lambda: Credentials.basic("", "pw"),
        lambda: Credentials.basic("alice", ""),
    ],
)
def test_empty_credentials_are_rejected(build):
    with pytest.raises(ValidationError):
        build()


def test_credential_factories_raise_package_errors():
    with pytest.raises(ValidationError) as excinfo:
        Credentials.bearer("")

    assert isinstance(excinfo.value.__cause__, PydanticValidationError)
