import numpy as np
import pytest

from handlekit.key import INDEX_MAX, Index, Key, OwnedLabel, StaticLabel, to_key


def test_str_converts_to_owned_label():
    key = to_key("player")

    assert isinstance(key, OwnedLabel)
    assert key.value == "player"


def test_int_converts_to_index():
    assert to_key(42) == Index(42)
    assert Key.of(7) == Index(7)


def test_numpy_unsigned_converts_to_index():
    key = to_key(np.uint32(5))

    assert key == Index(5)
    assert type(key.value) is int


def test_existing_key_passes_through():
    key = StaticLabel("cube")

    assert to_key(key) is key


def test_static_and_owned_labels_never_equal():
    # Same text, different identity spaces.
    assert StaticLabel("x") != OwnedLabel("x")
    assert OwnedLabel("x") != StaticLabel("x")
    assert len({StaticLabel("x"), OwnedLabel("x")}) == 2


def test_label_and_index_never_equal():
    assert OwnedLabel("1") != Index(1)


def test_equal_keys_hash_equal():
    assert hash(OwnedLabel("a")) == hash(OwnedLabel("a"))
    assert hash(StaticLabel("a")) == hash(StaticLabel("a"))
    assert hash(Index(3)) == hash(Index(3))


def test_static_label_is_interned():
    built = "".join(["sp", "rite"])

    assert StaticLabel(built).value is StaticLabel("sprite").value


def test_owned_label_flattens_str_subclass():
    class Path(str):
        pass

    key = OwnedLabel(Path("a/b"))

    assert type(key.value) is str
    assert key == OwnedLabel("a/b")


def test_keys_are_immutable():
    key = Index(1)

    with pytest.raises(AttributeError):
        key.value = 2  # type: ignore[misc]


def test_index_bounds():
    assert Index(0).value == 0
    assert Index(INDEX_MAX).value == INDEX_MAX

    with pytest.raises(ValueError):
        Index(-1)

    with pytest.raises(ValueError):
        Index(INDEX_MAX + 1)


def test_bool_is_not_an_index():
    with pytest.raises(TypeError):
        to_key(True)

    with pytest.raises(TypeError):
        Index(np.bool_(False))  # type: ignore[arg-type]


def test_unsupported_key_type_raises():
    with pytest.raises(TypeError) as exc:
        to_key(1.5)  # type: ignore[arg-type]

    assert "float" in str(exc.value)

    with pytest.raises(TypeError):
        StaticLabel(3)  # type: ignore[arg-type]


def test_key_rendering():
    assert repr(StaticLabel("x")) == "StaticLabel(value='x')"
    assert repr(Index(42)) == "Index(value=42)"
    assert str(OwnedLabel("x")) == "x"
    assert str(Index(42)) == "42"
