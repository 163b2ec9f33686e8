import random

import pytest

from tower import (
    DEFAULT_OPS,
    DivisionByZeroError,
    FieldOps,
    LevelMismatchError,
    TowerConfig,
    TowerElement,
    UnsupportedLevelError,
    format_element,
    parse,
)

ops = DEFAULT_OPS


def mul(a: str, b: str) -> str:
    return format_element(ops.multiply(parse(a), parse(b)))


def add(a: str, b: str) -> str:
    return format_element(ops.add(parse(a), parse(b)))


def div(a: str, b: str) -> str:
    return format_element(ops.divide(parse(a), parse(b)))


def inv(a: str) -> str:
    return format_element(ops.invert(parse(a)))


def rot(a: str) -> str:
    return format_element(ops.multiply_by_generator(parse(a)))


def sample(level: int, n: int) -> list[TowerElement]:
    if level <= 2:
        return list(TowerElement.elements(level))
    return [TowerElement.random_element(level) for _ in range(n)]


def test_base_field_vectors():
    assert mul("1", "1") == "1"
    assert mul("1", "0") == "0"
    assert add("1", "1") == "0"
    assert inv("1") == "1"


def test_level_one_vectors():
    assert mul("10", "10") == "10"
    # X0^2 = X0 + 1
    assert mul("01", "01") == "11"
    # X0 (1 + X0) = 1
    assert mul("01", "11") == "10"
    assert add("11", "10") == "01"
    assert add("00", "10") == "10"


def test_level_two_vectors():
    assert mul("0010", "1001") == "0101"
    assert mul(add("1001", "1000"), "1010") == "0110"
    assert div("0001", "1111") == "0101"
    assert div("0100", "1111") == "1001"
    assert inv("1111") == "1110"
    assert inv("0010") == "0110"


def test_level_three_vectors():
    # X2^2 = X1X2 + 1
    assert mul("00001000", "00001000") == "10000010"
    assert inv("00001000") == "00101000"


def test_multiply_by_generator_vectors():
    # X_{-1} is taken to be 1
    assert rot("0") == "0"
    assert rot("1") == "1"
    assert rot("11") == "10"
    assert rot("00") == "00"
    assert rot("10") == "01"
    assert rot("0000") == "0000"
    assert rot("1000") == "0010"
    # a high limb of zero just swaps the limbs
    assert rot("10010000") == "00001001"
    # X2 (X1X2 + 1) = X1 + X0X1X2
    assert rot("10000010") == "00100001"


@pytest.mark.parametrize("level", range(0, 6))
def test_addition_laws(level):
    random.seed(100 + level)
    zero = TowerElement.zero(level)
    elems = sample(level, 8)
    for a in elems:
        assert ops.add(a, a) == zero
        assert ops.add(a, zero) == a
        for b in elems:
            assert ops.add(a, b) == ops.add(b, a)
            for c in elems[:4]:
                assert ops.add(ops.add(a, b), c) == ops.add(a, ops.add(b, c))


@pytest.mark.parametrize("level", range(0, 6))
def test_multiplication_laws(level):
    random.seed(200 + level)
    zero, one = TowerElement.zero(level), TowerElement.one(level)
    elems = sample(level, 6)
    for a in elems:
        assert ops.multiply(a, one) == a
        assert ops.multiply(one, a) == a
        assert ops.multiply(a, zero) == zero
        for b in elems:
            ab = ops.multiply(a, b)
            assert ab == ops.multiply(b, a)
            for c in elems[:4]:
                assert ops.multiply(ab, c) == ops.multiply(a, ops.multiply(b, c))
                assert ops.multiply(a, ops.add(b, c)) == ops.add(
                    ab, ops.multiply(a, c)
                )


@pytest.mark.parametrize("level", range(0, 6))
def test_inverse(level):
    random.seed(300 + level)
    one = TowerElement.one(level)
    for a in sample(level, 10):
        if a.is_zero():
            continue
        a_inv = ops.invert(a)
        assert ops.multiply(a, a_inv) == one
        assert ops.invert(a_inv) == a
        assert ops.divide(a, a) == one


def test_inverse_matches_brute_force_in_t2():
    one = TowerElement.one(2)
    elems = list(TowerElement.elements(2))
    pairs = [
        (a, b) for a in elems if not a.is_zero() for b in elems
        if ops.multiply(a, b) == one
    ]
    assert len(pairs) == 15
    for a, b in pairs:
        assert ops.invert(a) == b


@pytest.mark.parametrize("level", range(0, 8))
def test_invert_zero_fails_at_every_level(level):
    with pytest.raises(DivisionByZeroError):
        ops.invert(TowerElement.zero(level))
    with pytest.raises(DivisionByZeroError):
        ops.divide(TowerElement.one(level), TowerElement.zero(level))


def test_top_level_round_trip():
    random.seed(7)
    a = TowerElement.random_element(7)
    while a.is_zero():
        a = TowerElement.random_element(7)
    assert ops.multiply(a, ops.invert(a)) == TowerElement.one(7)


@pytest.mark.parametrize("level", range(1, 4))
def test_fermat(level):
    random.seed(400 + level)
    order = (1 << (1 << level)) - 1
    for a in sample(level, 4):
        if a.is_zero():
            continue
        assert ops.pow(a, order) == TowerElement.one(level)
        assert ops.pow(a, -1) == ops.invert(a)
        assert ops.pow(a, 0) == TowerElement.one(level)
        assert ops.pow(a, 2) == ops.square(a)


@pytest.mark.parametrize("level", range(0, 6))
def test_multiply_by_generator_agrees_with_multiply(level):
    random.seed(500 + level)
    x = TowerElement.generator(level)
    for a in sample(level, 8):
        assert ops.multiply_by_generator(a) == ops.multiply(x, a)


def test_lift_is_a_field_embedding():
    random.seed(11)
    for _ in range(10):
        a, b = TowerElement.random_element(2), TowerElement.random_element(2)
        assert ops.multiply(a, b).lift(4) == ops.multiply(a.lift(4), b.lift(4))
        assert ops.add(a, b).lift(4) == ops.add(a.lift(4), b.lift(4))
        if not a.is_zero():
            assert ops.invert(a).lift(4) == ops.invert(a.lift(4))


def test_level_mismatch():
    with pytest.raises(LevelMismatchError):
        ops.add(parse("10"), parse("1000"))
    with pytest.raises(LevelMismatchError):
        ops.multiply(parse("1"), parse("10"))
    with pytest.raises(LevelMismatchError):
        ops.divide(parse("0100"), parse("11"))


def test_depth_guard():
    small = FieldOps(TowerConfig.default(2))
    a = parse("10000000")
    with pytest.raises(UnsupportedLevelError):
        small.multiply(a, a)
    with pytest.raises(UnsupportedLevelError):
        small.invert(a)
    assert format_element(small.multiply(parse("0010"), parse("1001"))) == "0101"


@pytest.mark.parametrize("level", range(1, 4))
def test_default_constants_give_fields(level):
    assert ops.is_irreducible(level)


def test_other_irreducible_constant():
    # X^2 + (1 + X0) X + 1 has no root in T1
    config = TowerConfig.from_dict({"max_level": 2, "constants": {1: "1", 2: "11"}})
    other = FieldOps(config)
    assert other.is_irreducible(2)
    assert not config.is_canonical(2)
    one = TowerElement.one(2)
    x = TowerElement.generator(2)
    for a in TowerElement.elements(2):
        assert other.multiply_by_generator(a) == other.multiply(x, a)
        if not a.is_zero():
            assert other.multiply(a, other.invert(a)) == one
    assert other.multiply(x, x) != ops.multiply(x, x)


def test_reducible_constant_surfaces_zero_norm():
    # X^2 + X + 1 has the root X0 in T1, so X1 + X0 has norm zero
    bad = FieldOps(TowerConfig.from_dict({"max_level": 2, "constants": {1: "1", 2: "10"}}))
    assert not bad.is_irreducible(2)
    with pytest.raises(DivisionByZeroError):
        bad.invert(parse("0110"))


def test_operator_sugar():
    a, b = parse("0010"), parse("1001")
    assert format_element(a * b) == "0101"
    assert format_element(a + b) == "1011"
    assert a - b == a + b
    assert -a == a
    assert format_element(parse("0001") / parse("1111")) == "0101"
    assert format_element(a.inv()) == "0110"
    assert a ** 3 == a * a * a
