import json

import pytest
from pydantic import ValidationError

from ryandata_zipcodes import ZIPCODE_FIELDS, Zipcode, ZipCodeType, matching
from tests.conftest import make_record


class TestZipcodeModel:
    """Test the Zipcode record model."""

    def test_from_dataset_shape(self) -> None:
        record = Zipcode.model_validate(make_record("77429", area_codes=["281", "832"]))
        assert record.zip_code == "77429"
        assert record.area_codes == ("281", "832")
        assert isinstance(record.acceptable_cities, tuple)

    def test_frozen(self) -> None:
        record = Zipcode.model_validate(make_record("77429"))
        with pytest.raises(ValidationError):
            record.active = False  # type: ignore[misc]

    def test_hashable(self) -> None:
        a = Zipcode.model_validate(make_record("77429"))
        b = Zipcode.model_validate(make_record("77429"))
        assert a == b
        assert len({a, b}) == 1

    def test_json_round_trip(self) -> None:
        raw = make_record("00601", acceptable_cities=["Jard De Adjuntas"], state="PR")
        record = Zipcode.model_validate(raw)
        assert json.loads(record.to_json()) == raw
        assert Zipcode.model_validate_json(record.to_json()) == record
        assert record.to_dict() == raw

    def test_dict_keys_match_field_list(self) -> None:
        record = Zipcode.model_validate(make_record("77429"))
        assert set(record.to_dict()) == set(ZIPCODE_FIELDS)

    def test_extra_keys_ignored(self) -> None:
        record = Zipcode.model_validate(make_record("77429", population=12345))
        assert "population" not in record.to_dict()

    def test_missing_required_field(self) -> None:
        raw = make_record("77429")
        del raw["city"]
        with pytest.raises(ValidationError):
            Zipcode.model_validate(raw)

    @pytest.mark.parametrize("field", [f for f in ZIPCODE_FIELDS if f != "county"])
    def test_every_field_but_county_is_required(self, field: str) -> None:
        raw = make_record("77429")
        del raw[field]
        with pytest.raises(ValidationError):
            Zipcode.model_validate(raw)

    def test_county_defaults_to_empty(self) -> None:
        raw = make_record("77429")
        del raw["county"]
        assert Zipcode.model_validate(raw).county == ""

    def test_type_enum(self) -> None:
        assert Zipcode.model_validate(make_record("1", zip_code_type="PO BOX")).type_enum is (
            ZipCodeType.PO_BOX
        )
        assert Zipcode.model_validate(make_record("1", zip_code_type="RURAL")).type_enum is None

    def test_coordinates(self) -> None:
        record = Zipcode.model_validate(make_record("77429", lat="29.9857", long="-95.6548"))
        assert record.latitude == pytest.approx(29.9857)
        assert record.longitude == pytest.approx(-95.6548)

    def test_missing_coordinates(self) -> None:
        record = Zipcode.model_validate(make_record("09001", lat="", long="n/a"))
        assert record.latitude is None
        assert record.longitude is None

    def test_bundled_military_record(self) -> None:
        (apo,) = matching("09001")
        assert apo.type_enum is ZipCodeType.MILITARY
        assert apo.state == "AE"
        assert apo.area_codes == ()
