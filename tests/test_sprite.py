import pytest

from penguinroom.constants import ClothingType, Direction, State, sprite_id_for
from penguinroom.sprite import PenguinSprite
from penguinroom.workers import WorkerPool


def test_new_sprite_stands_facing_south():
    sprite = PenguinSprite()
    assert sprite.direction == Direction.S
    assert sprite.state == State.STANDING
    assert sprite.sprite_id == sprite_id_for(Direction.S, State.STANDING)
    assert sprite.mouse_trackable is True


@pytest.mark.parametrize(
    "point, expected",
    [
        ((50, 300), Direction.S),
        ((300, 50), Direction.E),
        ((-300, 50), Direction.W),
        ((50, -300), Direction.N),
    ],
)
def test_look_at_turns_towards_point(point, expected):
    sprite = PenguinSprite()
    assert sprite.look_at(point) == expected
    assert sprite.direction == expected
    assert sprite.state == State.STANDING


def test_look_at_ignored_when_not_tracking():
    sprite = PenguinSprite()
    sprite.mouse_trackable = False
    assert sprite.look_at((300, 50)) == Direction.S


def test_press_at_starts_walking_and_clamps():
    sprite = PenguinSprite()
    target = sprite.press_at((2000, 2000), 800, 600)
    assert target == (800.0, 600.0)
    assert sprite.destination == target
    assert sprite.state == State.WALKING
    assert sprite.mouse_trackable is False
    assert sprite.animation_loop is True


def test_press_at_subtracts_origin():
    sprite = PenguinSprite()
    sprite.origin = (10.0, 20.0)
    target = sprite.press_at((100, 100), 800, 600)
    assert target == (90.0, 80.0)
    assert sprite.direction == Direction.SE


def test_press_at_walks_with_pool_and_stops():
    with WorkerPool() as pool:
        sprite = PenguinSprite(pool)
        worker = pool.move_worker()
        target = sprite.press_at((100, 100), 800, 600)
        while worker.started or worker.pending:
            pass
    assert sprite.position == target
    assert sprite.state == State.STANDING
    assert sprite.mouse_trackable is True


def test_wave_and_dance_keys():
    sprite = PenguinSprite()
    assert sprite.handle_key("w") is True
    assert sprite.state == State.WAVING
    assert sprite.animation_loop is False
    assert sprite.handle_key("D") is True
    assert sprite.state == State.DANCING
    assert sprite.animation_loop is True


@pytest.mark.parametrize(
    "key, direction",
    [("i", Direction.N), ("k", Direction.S), ("j", Direction.W), ("l", Direction.E)],
)
def test_sit_key_toggles(key, direction):
    sprite = PenguinSprite()
    sprite.handle_key(key)
    assert (sprite.direction, sprite.state) == (direction, State.SITTING)
    assert sprite.mouse_trackable is False
    sprite.handle_key(key)
    assert (sprite.direction, sprite.state) == (direction, State.STANDING)
    assert sprite.mouse_trackable is True


def test_keys_ignored_while_walking():
    sprite = PenguinSprite()
    sprite.press_at((400, 400), 800, 600)
    assert sprite.handle_key("w") is False
    assert sprite.state == State.WALKING


def test_unknown_key_does_nothing():
    sprite = PenguinSprite()
    assert sprite.handle_key("q") is False
    assert sprite.state == State.STANDING


def test_reset_keeps_direction():
    sprite = PenguinSprite()
    sprite.handle_key("l")
    sprite.frame = 3
    sprite.reset()
    assert sprite.direction == Direction.E
    assert sprite.state == State.STANDING
    assert sprite.frame == 0


def test_set_position():
    sprite = PenguinSprite()
    sprite.set_position((12, 34))
    assert sprite.position == (12.0, 34.0)


def test_wear_adds_and_replaces_clothing():
    sprite = PenguinSprite()
    first = sprite.wear(ClothingType.HEAD, 403)
    assert first.z_value == 6
    assert first.item_id == 403
    assert first.sprite_id == sprite.sprite_id
    second = sprite.wear(ClothingType.HEAD, 404)
    assert sprite.children == (second,)
    assert first.parent is None
    assert sprite.clothing[ClothingType.HEAD] is second


def test_worn_clothing_follows_turns():
    sprite = PenguinSprite()
    item = sprite.wear(ClothingType.FEET, 352)
    assert item.z_value == 2
    sprite.look_at((300, 50))
    assert item.direction == Direction.E
    assert item.sprite_id == sprite.sprite_id


def test_wear_rejects_unsupported_slot():
    sprite = PenguinSprite()
    with pytest.raises(ValueError):
        sprite.wear(ClothingType.PIN, 1)


def test_click_notifies_listeners():
    sprite = PenguinSprite()
    clicks = []
    sprite.on_click.append(lambda: clicks.append(sprite))
    sprite.click()
    assert clicks == [sprite]