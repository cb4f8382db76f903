"""Tests for _value.py: variants, projections and coercion."""

import datetime as dt

import pytest

from configmap import Bool, CfgMap, Datetime, Float, Int, List, Map, Null, Str


class TestProjections:
    def test_matching_variant_returns_payload(self):
        assert Int(5).as_int() == 5
        assert Float(1.5).as_float() == 1.5
        assert Str("x").as_str() == "x"
        assert Bool(False).as_bool() is False
        assert List([Int(1)]).as_list() == [Int(1)]

    def test_as_map_returns_the_nested_map(self):
        inner = CfgMap({"a": Int(1)})
        assert Map(inner).as_map() is inner

    @pytest.mark.parametrize(
        "value",
        [Float(3.0), Str("3"), Bool(True), List([]), Map(CfgMap()), Null()],
    )
    def test_mismatch_returns_none(self, value):
        assert value.as_int() is None

    def test_as_datetime(self):
        moment = dt.datetime(2024, 1, 2, 3, 4, 5)
        assert Datetime(moment).as_datetime() == moment
        assert Str("2024-01-02").as_datetime() is None

    def test_kind_checks(self):
        assert Int(1).is_int()
        assert not Int(1).is_float()
        assert Null().is_null()
        assert Map(CfgMap()).is_map()
        assert List([]).is_list()
        assert Datetime(dt.date(2024, 1, 1)).is_datetime()


class TestEquality:
    def test_structural(self):
        assert List([Int(1), Str("a")]) == List([Int(1), Str("a")])
        assert Map(CfgMap({"a": Int(1)})) == Map(CfgMap({"a": Int(1)}))

    def test_variant_sensitive(self):
        assert Int(3) != Float(3.0)
        assert Int(1) != Bool(True)
        assert Str("1") != Int(1)

    def test_null_equals_null(self):
        assert Null() == Null()

    def test_values_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(Int(1))


class TestCoercion:
    def test_to_int_truncates_float(self):
        assert Float(3.9).to_int() == 3
        assert Float(-3.9).to_int() == -3

    def test_to_int_non_finite(self):
        """NaN and infinities have no integer value, so the result is absent
        rather than a saturated or zeroed number."""
        assert Float(float("inf")).to_int() is None
        assert Float(float("nan")).to_int() is None

    def test_to_int_out_of_range_float(self):
        assert Float(1e300).to_int() is None
        assert Float(-1e19).to_int() is None
        assert Float(9.0e18).to_int() == 9_000_000_000_000_000_000

    def test_to_float_widens_int(self):
        result = Int(2).to_float()
        assert result == 2.0
        assert isinstance(result, float)

    def test_non_numeric(self):
        assert Str("3").to_int() is None
        assert Bool(True).to_float() is None


class TestConstruction:
    @pytest.mark.parametrize(
        "factory, payload",
        [
            (Int, True),
            (Int, 1.0),
            (Float, 1),
            (Str, 1),
            (Bool, 1),
            (List, (Int(1),)),
            (Map, {}),
            (Datetime, "2024-01-01"),
        ],
    )
    def test_wrong_payload_type_raises(self, factory, payload):
        with pytest.raises(TypeError):
            factory(payload)

    def test_list_elements_must_be_values(self):
        with pytest.raises(TypeError, match="List elements"):
            List([1, 2])

    def test_int_range(self):
        assert Int(2**63 - 1).as_int() == 2**63 - 1
        assert Int(-(2**63)).as_int() == -(2**63)
        with pytest.raises(ValueError, match="64-bit"):
            Int(2**63)

    def test_empty_list_default(self):
        assert List().as_list() == []

    def test_repr(self):
        assert repr(Int(1)) == "Int(1)"
        assert repr(List([Str("a")])) == "List([Str('a')])"
        assert repr(Null()) == "Null()"
