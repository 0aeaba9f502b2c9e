"""
Tests unitaires pour ImageFlag.
"""

import pytest

from tvdb.core.value_objects import (
    IMG_FLAG_16X9,
    IMG_FLAG_4X3,
    IMG_FLAG_IMPROPER_ACTION_SHOT,
    NULL_IMG_FLAG,
    ImageFlag,
)


class TestImageFlagName:
    """Tests pour ImageFlag.name."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "4:3"),
            (2, "16x9"),
            (3, "Invalid Aspect Ratio"),
            (4, "Image Too Small"),
            (5, "Black Bars"),
            (6, "Improper Action Shot"),
        ],
    )
    def test_known_values(self, value: int, expected: str) -> None:
        assert ImageFlag(value, True).name == expected

    def test_unknown_value_falls_back_to_number(self) -> None:
        assert ImageFlag(99, True).name == "99"

    def test_absent_flag_has_empty_name(self) -> None:
        assert NULL_IMG_FLAG.name == ""
        assert str(NULL_IMG_FLAG) == ""

    def test_constants(self) -> None:
        assert IMG_FLAG_4X3 == ImageFlag(1, True)
        assert IMG_FLAG_16X9.name == "16x9"
        assert IMG_FLAG_IMPROPER_ACTION_SHOT.value == 6
