import numpy as np
import pytest

from lookup_tables import (
    Table, TableOptions, InterpolationStyle, build_table, configure, evaluate, iter_tables,
    ArityError, ConfigurationError, ConstructionError, UnknownStyleError,
)
from lookup_tables.core import MINIMUM_POINTS


def nested_data():
    return {
        1.0: {1.0: 4.0, 2.0: 5.0, 3.0: 6.0},
        2.0: {1.0: 6.0, 3.0: 8.0, 4.0: 10.0},
    }


# Styles

def test_style_parse():
    assert InterpolationStyle.parse("cubic") is InterpolationStyle.CUBIC
    assert InterpolationStyle.parse(" Catmull ") is InterpolationStyle.CATMULL
    assert InterpolationStyle.parse(3) is InterpolationStyle.LAGRANGE3
    assert InterpolationStyle.parse(InterpolationStyle.LINEAR) is InterpolationStyle.LINEAR
    for bad in ("spline", 0, 6, None, True, 2.5):
        with pytest.raises(UnknownStyleError):
            InterpolationStyle.parse(bad)


def test_style_constants_match_table_attributes():
    assert Table.LINEAR == 1
    assert Table.LAGRANGE2 == 2
    assert Table.LAGRANGE3 == 3
    assert Table.CUBIC == 4
    assert Table.CATMULL == 5
    assert {s: s.minimum_points for s in InterpolationStyle} == MINIMUM_POINTS


# Options

def test_options_from_dict():
    opts = TableOptions.from_dict({'style': 'lagrange3', 'extrapolate': False})
    assert opts.style is InterpolationStyle.LAGRANGE3
    assert opts.extrapolate is False
    assert opts.to_dict() == {'style': 'lagrange3', 'extrapolate': False}
    assert TableOptions.from_dict({}) == TableOptions()


def test_options_reject_bad_input():
    with pytest.raises(ConfigurationError) as excinfo:
        TableOptions.from_dict({'smoothing': 0.1})
    assert excinfo.value.config_key == 'smoothing'
    with pytest.raises(ConfigurationError):
        TableOptions(extrapolate="yes")
    with pytest.raises(UnknownStyleError):
        TableOptions.from_dict({'style': 'bezier'})


def test_options_apply_recursively():
    t = build_table(nested_data())
    TableOptions(style='catmull', extrapolate=False).apply(t, recursive=True)
    for _, node in iter_tables(t):
        assert node.style is InterpolationStyle.CATMULL
        assert node.extrapolate is False

    t = build_table(nested_data())
    TableOptions(style='catmull').apply(t)
    assert t.style is InterpolationStyle.CATMULL
    assert t.dependents[0].style is InterpolationStyle.LINEAR


# Building

def test_build_table_from_nested_mappings():
    t = build_table(nested_data())
    assert t.dimensions == 2
    assert t.independents == (1.0, 2.0)
    assert t.read(1.5, 3.0) == 7.0


def test_build_table_from_pairs_and_tables():
    leaf = Table([0.0, 1.0], [0.0, 10.0], extrapolate=False)
    t = build_table(([0.0, 1.0], [leaf, ([0.0, 2.0], [0.0, 10.0])]))
    assert t.dependents[0] is leaf
    assert t.read(0.0, 2.0) == 10.0
    assert t.read(1.0, 2.0) == 10.0
    assert t.read(0.5, 1.0) == 7.5


def test_build_table_applies_options_to_created_levels():
    leaf = Table([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    opts = TableOptions(style=InterpolationStyle.LAGRANGE2, extrapolate=False)
    t = build_table({0.0: leaf, 1.0: {0.0: 1.0, 1.0: 2.0, 2.0: 5.0}, 2.0: leaf}, options=opts)
    assert t.style is InterpolationStyle.LAGRANGE2
    assert t.dependents[1].style is InterpolationStyle.LAGRANGE2
    assert leaf.style is InterpolationStyle.LINEAR


def test_build_table_rejects_other_inputs():
    with pytest.raises(ConstructionError):
        build_table([1.0, 2.0])
    with pytest.raises(ConstructionError):
        build_table({1.0: 2.0, 2.0: "three"})


# Configuration helpers

def test_configure_single_level_and_recursive():
    t = build_table(nested_data())
    assert configure(t, style='cubic') is t
    assert t.style is InterpolationStyle.CUBIC
    assert t.dependents[0].style is InterpolationStyle.LINEAR
    assert t.extrapolate is True

    configure(t, extrapolate=False, recursive=True)
    assert all(not node.extrapolate for _, node in iter_tables(t))
    assert t.style is InterpolationStyle.CUBIC


def test_iter_tables_depths():
    t = build_table({1.0: {1.0: {0.0: 1.0, 1.0: 2.0}, 2.0: {0.0: 1.0, 1.0: 2.0}},
                     2.0: {1.0: {0.0: 1.0, 1.0: 2.0}, 2.0: {0.0: 1.0, 1.0: 2.0}}})
    depths = [depth for depth, _ in iter_tables(t)]
    assert depths == [0, 1, 2, 2, 1, 2, 2]


# Batch evaluation

def test_evaluate_univariate():
    t = Table([1.0, 2.0], [3.0, 4.0])
    values = evaluate(t, [0.0, 1.5, 3.0])
    assert isinstance(values, np.ndarray)
    assert np.array_equal(values, [2.0, 3.5, 5.0])


def test_evaluate_bivariate():
    t = build_table(nested_data())
    points = np.array([[1.0, 1.0], [2.0, 3.0], [1.5, 3.0]])
    assert np.array_equal(evaluate(t, points), [t.read(*p) for p in points])


def test_evaluate_shape_errors():
    t = build_table(nested_data())
    with pytest.raises(ArityError):
        evaluate(t, [1.0, 2.0])
    with pytest.raises(ArityError):
        evaluate(t, np.zeros((2, 2, 2)))
    with pytest.raises(ArityError):
        evaluate(t, [[1.0, 2.0, 3.0]])
