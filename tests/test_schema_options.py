import pytest

from easyfit import Options, VarType
from easyfit.schema import NOTHING, VECTOR, names, total_dim, validate_schema, without


def test_vartype_defaults_and_validation() -> None:
    v = VarType("a")
    assert v.type == "number"
    assert v.dim == 1
    assert v.boundable
    assert not VarType("c", NOTHING).boundable

    with pytest.raises(ValueError, match="dim"):
        VarType("a", dim=0)
    with pytest.raises(ValueError, match="dim"):
        VarType("a", dim=True)
    with pytest.raises(ValueError, match="type tag"):
        VarType("a", "float")
    with pytest.raises(ValueError):
        VarType("")


def test_schema_helpers_preserve_order() -> None:
    schema = (VarType("a"), VarType("w", VECTOR, 3), VarType("c", NOTHING))

    assert total_dim(schema) == 5
    assert names(schema) == ("a", "w", "c")
    assert names(without(schema, "w")) == ("a", "c")
    assert total_dim(without(schema, "c")) == 4
    with pytest.raises(KeyError):
        without(schema, "zz")


def test_validate_schema_rejects_duplicates_and_non_vartypes() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        validate_schema([VarType("a"), VarType("a")])
    with pytest.raises(TypeError):
        validate_schema([("a", "number", 1)])


def test_options_defaults() -> None:
    opts = Options()
    assert opts.fine == 100
    assert opts.p0_range == (-1.0, 1.0)
    assert opts.backend == "scipy.curve_fit"
    assert opts.strict is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fine": 0},
        {"fine": 2.5},
        {"nbest": 0},
        {"maxtrials": 0},
        {"maxfev": -1},
        {"besttol": -1.0},
        {"p0_range": (1.0, 1.0)},
        {"p0_range": (0.0, float("inf"))},
        {"p0_range": 3.0},
    ],
)
def test_options_reject_invalid_values(kwargs) -> None:
    with pytest.raises(ValueError):
        Options(**kwargs)


def test_options_replace_returns_validated_copy() -> None:
    opts = Options(seed=1)
    other = opts.replace(fine=7)
    assert other.fine == 7
    assert other.seed == 1
    assert opts.fine == 100
    with pytest.raises(ValueError):
        opts.replace(fine=-1)
