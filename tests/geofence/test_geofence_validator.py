from __future__ import annotations

import pytest

from geo_attendance.core.enums import FailureReason
from geo_attendance.core.exceptions import ValidationError
from geo_attendance.geofence.model import Coordinate, Geofence
from geo_attendance.geofence.validator import GeofenceValidator, haversine_distance

OFFICE = Coordinate(latitude=13.274497, longitude=79.121317)


def test_nearby_user_is_within_radius():
    result = GeofenceValidator().validate(Coordinate(13.2746, 79.1214), OFFICE, 100)

    assert result.within_radius is True
    assert 10 < result.distance_meters < 20


def test_user_500m_north_is_outside():
    # 500 m along the meridian: 500 / (6371000 * pi / 180) degrees.
    user = Coordinate(latitude=13.274497 + 0.00449661, longitude=79.121317)

    result = GeofenceValidator().validate(user, OFFICE, 100)

    assert result.within_radius is False
    assert result.distance_meters == pytest.approx(500, abs=1)


def test_distance_equal_to_radius_is_within():
    user = Coordinate(latitude=13.2760, longitude=79.1220)
    distance = haversine_distance(user.latitude, user.longitude, OFFICE.latitude, OFFICE.longitude)

    validator = GeofenceValidator()

    assert validator.validate(user, OFFICE, distance).within_radius is True
    assert validator.validate(user, OFFICE, distance - 1e-6).within_radius is False


def test_same_point_has_zero_distance():
    result = GeofenceValidator().validate(OFFICE, OFFICE, 0)

    assert result.distance_meters == 0
    assert result.within_radius is True


def test_zero_coordinates_are_not_treated_as_missing():
    origin = Coordinate(latitude=0.0, longitude=0.0)

    result = GeofenceValidator().validate(origin, origin, 1)

    assert result.within_radius is True


@pytest.mark.parametrize(
    "user",
    [None, Coordinate(None, 79.1214), Coordinate(13.2746, None), Coordinate(None, None)],
)
def test_missing_user_coordinate_is_a_precondition_failure(user):
    with pytest.raises(ValidationError) as exc:
        GeofenceValidator().validate(user, OFFICE, 100)

    assert exc.value.reason == FailureReason.MISSING_LOCATION


def test_missing_office_coordinate_is_a_precondition_failure():
    with pytest.raises(ValidationError):
        GeofenceValidator().validate(OFFICE, Coordinate(None, None), 100)


def test_check_uses_geofence_center_and_radius():
    fence = Geofence(center=OFFICE, radius_meters=5)

    result = GeofenceValidator().check(Coordinate(13.2746, 79.1214), fence)

    assert result.within_radius is False
