import pytest

from nightfall.hud import (
    BULLET_SPACING,
    HIT_FLASH_PERIOD,
    RELOAD_FRAMES,
    HitFlash,
    IconState,
    bullet_icon_position,
    heart_icon_position,
    icon_state,
    reload_frame,
    reload_icon_position,
)

W, H = 800.0, 600.0


def test_icon_state():
    assert icon_state(0, 1) is IconState.AVAILABLE
    assert icon_state(1, 1) is IconState.UNAVAILABLE
    assert icon_state(0, 0) is IconState.UNAVAILABLE


def test_top_bullet_in_corner():
    pos = bullet_icon_position(5, 6, W, H)
    assert pos.x == W / 2 - 40
    assert pos.y == H / 2 - 30


def test_bullets_stack_downwards():
    positions = [bullet_icon_position(i, 6, W, H) for i in range(6)]
    for lower, upper in zip(positions, positions[1:]):
        assert upper.y - lower.y == pytest.approx(BULLET_SPACING)
        assert upper.x == lower.x


def test_reload_below_lowest_bullet():
    lowest = bullet_icon_position(0, 6, W, H)
    dial = reload_icon_position(6, W, H)
    assert dial.x == lowest.x
    assert lowest.y - dial.y == pytest.approx(BULLET_SPACING)


def test_last_heart_in_corner():
    pos = heart_icon_position(2, 3, W, H)
    assert pos.x == -W / 2 + 40
    assert pos.y == H / 2 - 30


def test_hearts_run_leftwards_by_index():
    xs = [heart_icon_position(i, 4, W, H).x for i in range(4)]
    assert xs == sorted(xs, reverse=True)


@pytest.mark.parametrize("index", [-1, 3])
def test_index_out_of_range(index):
    with pytest.raises(ValueError):
        bullet_icon_position(index, 3, W, H)
    with pytest.raises(ValueError):
        heart_icon_position(index, 3, W, H)


def test_reload_frame_bounds():
    assert reload_frame(0.0, 1.0) == RELOAD_FRAMES
    assert reload_frame(1.0, 1.0) == 0
    assert reload_frame(5.0, 1.0) == 0


def test_reload_frame_monotonic():
    frames = [reload_frame(r / 10, 1.0) for r in range(10, 0, -1)]
    assert frames == sorted(frames)
    assert all(0 <= f < RELOAD_FRAMES for f in frames)


def test_hit_flash_blinks():
    flash = HitFlash()
    assert flash.update(0.0, True, True) is True
    assert flash.update(HIT_FLASH_PERIOD, True, False) is False
    assert flash.update(HIT_FLASH_PERIOD, True, False) is True


def test_hit_flash_hidden_without_invincibility():
    flash = HitFlash()
    flash.update(0.0, True, True)
    assert flash.update(0.1, False, False) is False
    assert flash.visible is False


def test_hit_flash_damage_resets_blink():
    flash = HitFlash()
    flash.update(0.0, True, True)
    flash.update(HIT_FLASH_PERIOD * 0.8, True, False)
    assert flash.update(HIT_FLASH_PERIOD * 0.8, True, True) is True