import pytest

from fancyweb.lcg import LinearCongruentialGenerator


def test_default_seed_is_zero_so_first_value_is_increment():
    lcg = LinearCongruentialGenerator()
    assert lcg.state == 0
    assert lcg.next_u32() == 12345


def test_same_seed_same_sequence():
    a = LinearCongruentialGenerator(987)
    b = LinearCongruentialGenerator(987)
    assert [a.next_u32() for _ in range(50)] == [b.next_u32() for _ in range(50)]


def test_reseeding_with_output_continues_sequence():
    lcg = LinearCongruentialGenerator(42)
    first = lcg.next_u32()
    second = lcg.next_u32()
    assert LinearCongruentialGenerator(first).next_u32() == second


def test_values_stay_in_u32_range():
    lcg = LinearCongruentialGenerator(0xFFFF_FFFF)
    for _ in range(1000):
        assert 0 <= lcg.next_u32() <= 0xFFFF_FFFF


def test_next_bool_is_parity_of_next_u32():
    a = LinearCongruentialGenerator(7)
    b = LinearCongruentialGenerator(7)
    for _ in range(200):
        assert a.next_bool() == (b.next_u32() % 2 == 1)


def test_next_i32_is_signed_view_of_next_u32():
    a = LinearCongruentialGenerator(3)
    b = LinearCongruentialGenerator(3)
    for _ in range(200):
        signed = a.next_i32()
        assert -(1 << 31) <= signed < (1 << 31)
        assert signed % (1 << 32) == b.next_u32()


def test_next_i32_produces_negative_values():
    lcg = LinearCongruentialGenerator(1)
    assert any(lcg.next_i32() < 0 for _ in range(100))


@pytest.mark.parametrize("bits", [4, 8, 12, 16])
def test_period_of_low_bits_is_full(bits):
    # The full 2**32 period check is far too slow; the low bits of a
    # full-period generator modulo 2**32 cycle with period 2**bits.
    mask = (1 << bits) - 1
    lcg = LinearCongruentialGenerator(0)
    values = [lcg.next_u32() & mask for _ in range(1 << bits)]
    assert values[-1] == 0
    assert sorted(values) == list(range(1 << bits))


@pytest.mark.parametrize("seed", [-1, 1 << 32])
def test_rejects_out_of_range_seed(seed):
    with pytest.raises(ValueError):
        LinearCongruentialGenerator(seed)