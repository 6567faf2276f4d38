import pytest
from src.world.rng import RNG

def test_pick_is_reproducible_and_keeps_type():
    items = ("Farm", "Shop", "Cabin")
    a = [RNG(seed=17).pick(items) for _ in range(3)]
    b = [RNG(seed=17).pick(items) for _ in range(3)]
    assert a == b
    rng = RNG(seed=17)
    picks = [rng.pick(items) for _ in range(50)]
    assert set(picks) <= set(items)
    assert all(type(p) is str for p in picks)

def test_pick_on_empty_sequence_fails():
    with pytest.raises(ValueError):
        RNG(seed=1).pick([])

def test_only_integers_and_pick_are_exposed():
    public = {n for n in dir(RNG(seed=1)) if not n.startswith("_")}
    assert public == {"seed", "integers", "pick"}
