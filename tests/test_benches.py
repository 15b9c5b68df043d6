import random

import pytest

from scucells.benches import (
    decoder_bench,
    decoder_enable_bench,
    format_table,
    full_adder_bench,
    gate_bench,
    latch_bench,
    main,
    mux_bench,
    register_bench,
)


def rng(seed=7):
    return random.Random(seed)


def test_format_table_layout():
    text = format_table(("a", "b"), [(True, 5), (False, 12)])
    assert text == "a\tb\n\n1\t5\n0\t12\n"


def test_format_table_empty_rows():
    assert format_table(("x_out", "z_in"), []) == "x_out\tz_in\n\n"


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_full_adder_sums(seed):
    header, rows = full_adder_bench(rng(seed))
    assert header == ("x_in", "y_in", "c_in", "z_out", "c_out")
    assert len(rows) == 6
    for x, y, c, z, carry in rows:
        assert int(x) + int(y) + int(c) == int(z) + 2 * int(carry)


def test_full_adder_is_deterministic_for_a_seed():
    first_header, first_rows = full_adder_bench(rng(11))
    second_header, second_rows = full_adder_bench(rng(11))
    assert first_header == second_header
    assert len(first_rows) == 6
    assert list(first_rows) == list(second_rows)


def test_mux_selects_input():
    header, rows = mux_bench(rng())
    assert header[0] == "x_in" and header[-1] == "output"
    assert header[1:-1] == tuple(f"Z{i}" for i in range(8))
    assert [row[0] for row in rows] == list(range(8))
    for row in rows:
        ctrl, inputs, out = row[0], row[1:-1], row[-1]
        assert out == inputs[ctrl]
        assert all(0 <= v < 650 for v in inputs)


def test_decoder_one_hot():
    header, rows = decoder_bench(rng())
    assert len(header) == 17
    assert [row[0] for row in rows] == list(range(16))
    for row in rows:
        x, outs = row[0], row[1:]
        assert [bool(o) for o in outs] == [i == x for i in range(16)]


@pytest.mark.parametrize("seed", [3, 9])
def test_decoder_enable_gates_outputs(seed):
    header, rows = decoder_enable_bench(rng(seed))
    assert header[:2] == ("x_in", "en_in")
    for row in rows:
        x, en, outs = row[0], row[1], row[2:]
        assert [bool(o) for o in outs] == [bool(en) and i == x for i in range(16)]


_TRUTH = {
    "and": lambda a, b: a and b,
    "nand": lambda a, b: not (a and b),
    "or": lambda a, b: a or b,
    "nor": lambda a, b: not (a or b),
    "xor": lambda a, b: a != b,
    "notxor": lambda a, b: a == b,
}


@pytest.mark.parametrize("kind", sorted(_TRUTH))
def test_two_input_gates(kind):
    header, rows = gate_bench(kind, rng(5))
    assert header == ("x0", "x1", "z")
    assert len(rows) == 6
    for a, b, z in rows:
        assert bool(z) == _TRUTH[kind](bool(a), bool(b))


def test_not_gate():
    header, rows = gate_bench("not", rng(5))
    assert header == ("x", "z")
    for x, z in rows:
        assert bool(z) == (not x)


def test_unknown_gate_kind():
    with pytest.raises(ValueError):
        gate_bench("maybe", rng())


@pytest.mark.parametrize("kind", ["plain", "clocked"])
def test_latch_follows_input(kind):
    header, rows = latch_bench(kind, rng())
    assert header == ("x_out", "z_in")
    assert len(rows) == 10
    for x, z in rows:
        assert z == x
        assert 0 <= x <= 2**31 - 1


@pytest.mark.parametrize("kind", ["enable", "clocked_enable"])
def test_latch_enable_holds(kind):
    header, rows = latch_bench(kind, rng(4))
    assert header == ("en_out", "x_out", "z_in")
    previous = 0
    for en, x, z in rows:
        assert z == (x if en else previous)
        previous = z


@pytest.mark.parametrize("kind", ["reset", "clocked_reset"])
def test_latch_reset_clears(kind):
    header, rows = latch_bench(kind, rng(4))
    assert header == ("reset_in", "x_out", "z_in")
    for reset, x, z in rows:
        assert z == (0 if reset else x)


@pytest.mark.parametrize("kind", ["enable_reset", "clocked_enable_reset"])
def test_latch_enable_reset(kind):
    header, rows = latch_bench(kind, rng(8))
    assert header == ("en_out", "reset_in", "x_out", "z_in")
    previous = 0
    for en, reset, x, z in rows:
        expected = 0 if reset else (x if en else previous)
        assert z == expected
        previous = z


def test_unknown_latch_kind():
    with pytest.raises(ValueError):
        latch_bench("sideways", rng())


def test_zero_register_outputs_zero():
    header, rows = register_bench("register", rng())
    assert header == ("x_out", "z_in")
    assert len(rows) == 10
    assert all(z == 0 for _, z in rows)


def test_register_enable_lags_one_cycle():
    header, rows = register_bench("enable", rng(6))
    assert header == ("en_out", "x_out", "z_in")
    assert rows[0][-1] == 0
    for (en, x, z), current in zip(rows, rows[1:]):
        assert current[-1] == (x if en else z)


def test_register_reset_lags_one_cycle():
    header, rows = register_bench("reset", rng(6))
    assert header == ("reset_in", "x_out", "z_in")
    assert rows[0][-1] == 0
    for (reset, x, _z), current in zip(rows, rows[1:]):
        assert current[-1] == (0 if reset else x)


def test_register_enable_reset_lags_one_cycle():
    header, rows = register_bench("enable_reset", rng(12))
    assert header == ("en_out", "reset_in", "x_out", "z_in")
    assert rows[0][-1] == 0
    for (en, reset, x, z), current in zip(rows, rows[1:]):
        assert current[-1] == (0 if reset else (x if en else z))


def test_unknown_register_kind():
    with pytest.raises(ValueError):
        register_bench(None, rng())


def test_main_prints_table(capsys):
    assert main(["gate", "and", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "x0\tx1\tz"
    assert lines[1] == ""
    assert len(lines) == 8


def test_main_matches_bench_output(capsys):
    assert main(["mux", "--seed", "3"]) == 0
    header, rows = mux_bench(random.Random(3))
    assert capsys.readouterr().out == format_table(header, rows)


def test_main_requires_kind():
    with pytest.raises(SystemExit):
        main(["latch"])


def test_main_rejects_kind_for_plain_bench():
    with pytest.raises(SystemExit):
        main(["decoder", "extra"])