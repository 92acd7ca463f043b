import pytest

from sciquest.core.grading import grade, normalize
from tests.factories import make_choice, make_free_text


class TestNormalize:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "Position of Moon/Earth/Sun",
            "  h2o  ",
            "Straße",
            "çà et là",
            "1,000 m/s",
            "\tNew\nLine\t",
        ],
    )
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    def test_strips_punctuation_and_case(self):
        assert normalize("Position of Moon/Earth/Sun") == normalize("POSITION OF MOON EARTH SUN")
        assert normalize("Position of Moon/Earth/Sun") == "POSITIONOFMOONEARTHSUN"

    def test_keeps_digits(self):
        assert normalize(" co2 ") == "CO2"


class TestGrade:
    def test_free_text_is_lenient(self):
        question = make_free_text(answer="Water Cycle")
        assert grade(question, "  water-cycle ")
        assert not grade(question, "water")

    def test_free_text_empty_submission_is_graded(self):
        assert not grade(make_free_text(answer="Moon"), "")

    def test_choice_requires_exact_text(self):
        question = make_choice(answer="Mars", options=("Venus", "Mars"))
        assert grade(question, "Mars")
        assert not grade(question, "mars")
        assert not grade(question, " Mars")
