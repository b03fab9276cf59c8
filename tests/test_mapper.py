import enum

import pytest

from caesar.mapper import Mapper


class Color(enum.Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


NAMES = ["red", "green", "blue"]


@pytest.fixture
def mapper():
    return Mapper("color", Color, NAMES)


def test_get_name(mapper):
    assert mapper.get_name(Color.GREEN) == "green"


def test_name_enum_round_trip(mapper):
    for member in Color:
        assert mapper.get_enum(mapper.get_name(member)) is member


def test_names_follow_member_order(mapper):
    assert [mapper.get_name(m) for m in Color] == NAMES


def test_has(mapper):
    assert mapper.has("blue")
    assert not mapper.has("pink")


def test_unknown_name_warns_and_returns_none(mapper):
    with pytest.warns(UserWarning, match="unknown color pink"):
        assert mapper.get_enum("pink") is None


def test_wrong_names_count_raises():
    with pytest.raises(ValueError):
        Mapper("color", Color, ["red", "green"])


def test_append_names_to(mapper):
    target = ["x"]
    mapper.append_names_to(target)
    assert target == ["x"] + NAMES


def test_all_names_string(mapper):
    assert mapper.all_names_string() == "red,green,blue"
    assert mapper.all_names_string().split(",") == NAMES