import pytest

from overhead.ppu import PPU466, SCREEN_HEIGHT, Sprite
from overhead.sprite_group import SpriteGroup


def make_tilemap():
    return [[((x + 16 * y) & 0xFF, y % 8) for y in range(16)] for x in range(16)]


@pytest.fixture
def ppu():
    return PPU466()


@pytest.fixture
def tilemap():
    return make_tilemap()


def make_group(ppu, tilemap, coords=((1, 2), (3, 4))):
    return SpriteGroup(list(coords), coords[0], iter(ppu.sprites), tilemap)


def test_sprites_take_tilemap_values(ppu, tilemap):
    make_group(ppu, tilemap)
    assert ppu.sprites[0].index == tilemap[1][2][0]
    assert ppu.sprites[0].attributes == tilemap[1][2][1]
    assert ppu.sprites[1].index == tilemap[3][4][0]
    assert ppu.sprites[1].attributes == tilemap[3][4][1]


def test_unused_sprites_untouched(ppu, tilemap):
    make_group(ppu, tilemap)
    assert ppu.sprites[2] == Sprite()


def test_group_exposes_its_sprites(ppu, tilemap):
    group = make_group(ppu, tilemap)
    assert group.sprites == ppu.sprites[:2]
    assert group.sprites[0] is ppu.sprites[0]


def test_exhausted_sprite_source_raises(tilemap):
    with pytest.raises(ValueError):
        SpriteGroup([(0, 0), (1, 1)], (0, 0), iter([Sprite()]), tilemap)


def test_draw_at_places_first_tile_at_position(ppu, tilemap):
    group = make_group(ppu, tilemap)
    group.draw_at((20, 30))
    assert (ppu.sprites[0].x, ppu.sprites[0].y) == (20, 30)


def test_draw_at_keeps_grid_layout(ppu, tilemap):
    group = make_group(ppu, tilemap)
    group.draw_at((20, 30))
    first, second = ppu.sprites[0], ppu.sprites[1]
    assert second.x - first.x == 8 * (3 - 1)
    assert second.y - first.y == 8 * (4 - 2)


def test_draw_at_truncates_floats(ppu, tilemap):
    group = make_group(ppu, tilemap)
    group.draw_at((20.9, 30.2))
    assert (ppu.sprites[0].x, ppu.sprites[0].y) == (20, 30)


def test_hide_moves_off_screen(ppu, tilemap):
    group = make_group(ppu, tilemap)
    group.draw_at((50, 60))
    group.hide()
    for sprite in group.sprites:
        assert sprite.x == 0
        assert sprite.y == SCREEN_HEIGHT


def test_override_and_reset_palette(ppu, tilemap):
    group = make_group(ppu, tilemap)
    group.override_palette(5)
    assert [s.attributes for s in group.sprites] == [5, 5]
    group.reset_palette()
    assert ppu.sprites[0].attributes == tilemap[1][2][1]
    assert ppu.sprites[1].attributes == tilemap[3][4][1]


def test_set_offset_shifts_and_restores(ppu, tilemap):
    group = make_group(ppu, tilemap)
    base = [s.index for s in group.sprites]
    group.set_offset(3)
    assert [s.index for s in group.sprites] == [b + 3 for b in base]
    assert group.offset == 3
    group.set_offset(0)
    assert [s.index for s in group.sprites] == base


def test_set_offset_wraps_as_byte(ppu):
    tilemap = [[(255, 0)] * 16 for _ in range(16)]
    group = SpriteGroup([(0, 0)], (0, 0), iter(ppu.sprites), tilemap)
    group.set_offset(1)
    assert ppu.sprites[0].index == 0