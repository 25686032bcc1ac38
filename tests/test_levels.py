import pytest

from authkit.levels import LevelInfo, User, get_level_info, get_level_info_list


def test_get_level_infos():
    assert get_level_info_list() == [
        LevelInfo(1, "青铜"),
        LevelInfo(2, "白银"),
        LevelInfo(3, "黄金"),
    ]


def test_list_is_a_copy():
    infos = get_level_info_list()
    infos.clear()
    assert len(get_level_info_list()) == 3


@pytest.mark.parametrize("level", [1, 2, 3])
def test_lookup(level):
    assert get_level_info(level).level == level


@pytest.mark.parametrize("level", [0, 4, -1])
def test_lookup_missing(level):
    with pytest.raises(LookupError, match="not Found Level Info"):
        get_level_info(level)


def test_user_level_name():
    user = User(name="someone", class_=2, level=3)
    assert get_level_info(user.level).name == "黄金"