from blocks_geometry import COLORS, KINDS, SHAPES, height, rotate_cw, width


def test_catalog_has_seven_shapes_and_colors():
    assert set(KINDS) == {"I", "T", "L", "J", "O", "S", "Z"}
    assert len(COLORS) == 7
    for shape in SHAPES.values():
        assert all(len(row) == width(shape) for row in shape)


def test_rotate_cw_turns_t_clockwise():
    assert rotate_cw(SHAPES["T"]) == ((0, 1), (1, 1), (0, 1))


def test_rotate_swaps_dimensions():
    i = rotate_cw(SHAPES["I"])
    assert (width(i), height(i)) == (1, 4)
    l = rotate_cw(SHAPES["L"])
    assert (width(l), height(l)) == (2, 3)


def test_four_rotations_return_every_shape():
    for t, shape in SHAPES.items():
        m = shape
        for _ in range(4):
            m = rotate_cw(m)
        assert m == shape, t


def test_rotation_leaves_catalog_untouched():
    before = dict(SHAPES)
    rotate_cw(SHAPES["S"])
    assert SHAPES == before
