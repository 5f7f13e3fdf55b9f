import pytest

from academy.domain.assessments.errors import MalformedAssessmentError
from academy.domain.assessments.ids import normalize_id


class TestNormalizeId:
    def test_int_and_str_share_a_key(self):
        assert normalize_id(5) == normalize_id("5") == "5"

    def test_integral_float_is_treated_as_int(self):
        assert normalize_id(5.0) == "5"

    def test_none_and_empty_string_are_absent(self):
        assert normalize_id(None) is None
        assert normalize_id("") is None

    def test_string_is_kept_as_is(self):
        assert normalize_id("c1a") == "c1a"

    def test_boolean_is_rejected(self):
        with pytest.raises(MalformedAssessmentError):
            normalize_id(True)
