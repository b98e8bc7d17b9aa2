"""
Tests for Quadrature Generators
===============================
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from quadrature.generators import (
    GaussLegendreGenerator, GaussLobattoGenerator, create_qpoint_generator
)
from matesystem.exceptions import ConfigurationError


def integrate_monomial(points, powers):
    return sum(p.weight * np.prod([x ** k for x, k in zip(p.coords, powers)])
               for p in points)


def exact_monomial(powers):
    return np.prod([0.0 if k % 2 else 2.0 / (k + 1) for k in powers])


class TestGaussLegendre:
    """Tests for Gauss-Legendre points."""

    def test_point_counts(self):
        gen = GaussLegendreGenerator()
        assert gen.count(0, 'line') == 1
        assert gen.count(1, 'line') == 1
        assert gen.count(3, 'line') == 2
        assert gen.count(3, 'quad') == 4
        assert gen.count(3, 'hex') == 8
        assert gen.count(5, 'hex') == 27

    def test_exactness_1d(self):
        gen = GaussLegendreGenerator()
        for order in range(8):
            points = gen.generate(order, 'line')
            for k in range(order + 1):
                assert np.isclose(integrate_monomial(points, [k]), exact_monomial([k]))

    def test_exactness_quad(self):
        points = GaussLegendreGenerator().generate(4, 'quad')
        for px in range(5):
            for py in range(5):
                assert np.isclose(integrate_monomial(points, [px, py]),
                                  exact_monomial([px, py]))

    def test_excludes_boundary(self):
        for order in range(8):
            for p in GaussLegendreGenerator().generate(order, 'line'):
                assert abs(p.coords[0]) < 1.0


class TestGaussLobatto:
    """Tests for Gauss-Lobatto points."""

    def test_includes_boundary(self):
        gen = GaussLobattoGenerator()
        for order in range(8):
            xs = [p.coords[0] for p in gen.generate(order, 'line')]
            assert np.isclose(xs[0], -1.0)
            assert np.isclose(xs[-1], 1.0)

    def test_three_point_rule(self):
        points = GaussLobattoGenerator().generate(2, 'line')
        assert np.allclose([p.coords[0] for p in points], [-1.0, 0.0, 1.0])
        assert np.allclose([p.weight for p in points], [1 / 3, 4 / 3, 1 / 3])

    def test_four_point_rule(self):
        points = GaussLobattoGenerator().generate(4, 'line')
        x = 1.0 / np.sqrt(5.0)
        assert np.allclose([p.coords[0] for p in points], [-1.0, -x, x, 1.0])
        assert np.allclose([p.weight for p in points], [1 / 6, 5 / 6, 5 / 6, 1 / 6])

    def test_exactness_1d(self):
        gen = GaussLobattoGenerator()
        for order in range(8):
            points = gen.generate(order, 'line')
            for k in range(order + 1):
                assert np.isclose(integrate_monomial(points, [k]), exact_monomial([k]))

    def test_hex_corners_included(self):
        points = GaussLobattoGenerator().generate(1, 'hex')
        assert len(points) == 8
        assert all(np.allclose(np.abs(p.coords), 1.0) for p in points)


class TestGeneratorContract:
    """Tests shared by all schemes."""

    @pytest.mark.parametrize("scheme", ["legendre", "lobatto"])
    @pytest.mark.parametrize("geometry,dim", [("line", 1), ("quad", 2), ("hex", 3)])
    def test_weights_sum_to_volume(self, scheme, geometry, dim):
        gen = create_qpoint_generator(scheme)
        for order in range(6):
            points = gen.generate(order, geometry)
            assert np.isclose(sum(p.weight for p in points), 2.0 ** dim)
            assert all(len(p.coords) == dim for p in points)

    @pytest.mark.parametrize("scheme", ["legendre", "lobatto"])
    def test_deterministic(self, scheme):
        gen = create_qpoint_generator(scheme)
        assert gen.generate(3, 'hex') == gen.generate(3, 'hex')
        assert create_qpoint_generator(scheme).generate(3, 'quad') == gen.generate(3, 'quad')

    def test_first_coordinate_fastest(self):
        points = GaussLegendreGenerator().generate(3, 'quad')
        xs = [p.coords[0] for p in points]
        ys = [p.coords[1] for p in points]
        assert xs[0] < xs[1] and ys[0] == ys[1]
        assert ys[2] > ys[1] and xs[2] == xs[0]

    @pytest.mark.parametrize("scheme", ["legendre", "lobatto"])
    def test_symmetric_about_origin(self, scheme):
        points = create_qpoint_generator(scheme).generate(5, 'line')
        xs = np.array([p.coords[0] for p in points])
        ws = np.array([p.weight for p in points])
        assert np.allclose(xs, -xs[::-1])
        assert np.allclose(ws, ws[::-1])

    def test_negative_order(self):
        with pytest.raises(ConfigurationError):
            GaussLegendreGenerator().generate(-1, 'line')

    def test_unknown_geometry(self):
        with pytest.raises(ConfigurationError):
            GaussLobattoGenerator().generate(2, 'tri')

    def test_unknown_scheme(self):
        with pytest.raises(ConfigurationError):
            create_qpoint_generator('newton-cotes')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
