"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError
from src.h3range.models import GeoPoint, RadiusQuery


@pytest.mark.unit
class TestGeoPointModel:
    """Test suite for GeoPoint model."""

    def test_geopoint_valid_data(self):
        point = GeoPoint(lat=40.7128, lon=-74.0060)

        assert point.lat == 40.7128
        assert point.lon == -74.0060

    def test_geopoint_boundary_values(self):
        """Test that poles and the antimeridian are accepted."""
        GeoPoint(lat=90, lon=180)
        GeoPoint(lat=-90, lon=-180)

    def test_geopoint_latitude_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat=91, lon=0)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lat",) for error in errors)

    def test_geopoint_longitude_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat=0, lon=-180.5)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lon",) for error in errors)

    def test_geopoint_missing_lat(self):
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lon=-74.0060)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lat",) for error in errors)

    def test_geopoint_invalid_lat_type(self):
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat="invalid", lon=-74.0060)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lat",) for error in errors)


@pytest.mark.unit
class TestRadiusQueryModel:
    """Test suite for RadiusQuery model."""

    def test_radius_query_valid_data(self):
        query = RadiusQuery(lat=40.7128, lon=-74.0060, radius_m=500)

        assert query.radius_m == 500
        assert isinstance(query, GeoPoint)

    def test_radius_query_zero_radius(self):
        assert RadiusQuery(lat=0, lon=0, radius_m=0).radius_m == 0

    def test_radius_query_negative_radius(self):
        with pytest.raises(ValidationError) as exc_info:
            RadiusQuery(lat=0, lon=0, radius_m=-1)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("radius_m",) for error in errors)

    @pytest.mark.parametrize("radius", [float("inf"), float("nan")])
    def test_radius_query_non_finite_radius(self, radius):
        with pytest.raises(ValidationError) as exc_info:
            RadiusQuery(lat=0, lon=0, radius_m=radius)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("radius_m",) for error in errors)

    def test_radius_query_missing_radius(self):
        with pytest.raises(ValidationError) as exc_info:
            RadiusQuery(lat=0, lon=0)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("radius_m",) for error in errors)

    def test_radius_query_half_circumference_allowed(self):
        query = RadiusQuery(lat=0, lon=0, radius_m=20_037_509)
        assert query.radius_m == 20_037_509

    def test_radius_query_larger_than_globe(self):
        """Test that radii beyond half the Earth's circumference are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            RadiusQuery(lat=40.758, lon=-73.9855, radius_m=1e13)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("radius_m",) for error in errors)
