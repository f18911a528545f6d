import operator
import unittest

from rleraster.core import RunLengthRaster, ShapeMismatchError
from rleraster.ops import combine, map_rows, op_and, op_invert, op_or, op_xor


class TestScenario(unittest.TestCase):
    def setUp(self):
        self.a = RunLengthRaster.from_grid([[1, 1, 0, 0]], 4, 1)
        self.b = op_invert(self.a)

    def test_encodings(self):
        self.assertEqual(self.a.rows, (((2, 3),),))
        self.assertEqual(self.b.rows, (((0, 1),),))

    def test_xor_is_all_white(self):
        out = op_xor(self.a, self.b)
        self.assertEqual(out.rows, ((),))
        self.assertEqual(out.to_grid(), [[1, 1, 1, 1]])

    def test_and_is_full_black_run(self):
        out = op_and(self.a, self.b)
        self.assertEqual(out.rows, (((0, 3),),))
        self.assertEqual(out.to_grid(), [[0, 0, 0, 0]])

    def test_or(self):
        self.assertEqual(op_or(self.a, self.b).rows, ((),))


class TestLaws(unittest.TestCase):
    def setUp(self):
        self.grid = [
            [1, 0, 0, 1, 1, 0],
            [1, 1, 1, 1, 1, 1],
            [0, 0, 0, 0, 0, 0],
            [0, 1, 0, 1, 0, 1],
        ]
        self.a = RunLengthRaster.from_grid(self.grid, 6, 4)
        self.full = ((0, 5),)

    def test_and_with_inverse_is_all_false(self):
        out = op_and(self.a, op_invert(self.a))
        self.assertEqual(out.rows, (self.full,) * 4)

    def test_or_with_inverse_is_all_true(self):
        out = op_or(self.a, op_invert(self.a))
        self.assertEqual(out.rows, ((),) * 4)

    def test_xor_with_self_is_all_false(self):
        out = op_xor(self.a, self.a)
        self.assertEqual(out.rows, (self.full,) * 4)

    def test_xor_with_inverse_is_all_true(self):
        self.assertTrue(op_xor(self.a, op_invert(self.a)).is_blank())

    def test_double_negation(self):
        self.assertEqual(op_invert(op_invert(self.a)).rows, self.a.rows)

    def test_results_keep_run_invariant(self):
        from rleraster.codec import row_is_valid

        b = RunLengthRaster.from_grid([list(reversed(r)) for r in self.grid], 6, 4)
        for out in (op_and(self.a, b), op_or(self.a, b), op_xor(self.a, b)):
            for row in out.rows:
                self.assertTrue(row_is_valid(row, 6), row)

    def test_combine_matches_dense_truth_table(self):
        b = RunLengthRaster.from_grid([list(reversed(r)) for r in self.grid], 6, 4)
        out = combine(self.a, b, lambda p, q: p and not q)
        expected = [
            [1 if (pa and not pb) else 0 for pa, pb in zip(ra, reversed(ra))]
            for ra in self.grid
        ]
        self.assertEqual(out.to_grid(), expected)

    def test_map_rows_identity(self):
        self.assertEqual(map_rows(self.a, lambda p: p), self.a)


class TestOperatorsAndMethods(unittest.TestCase):
    def setUp(self):
        self.a = RunLengthRaster.from_grid([[1, 0, 1], [0, 0, 1]], 3, 2)
        self.b = RunLengthRaster.from_grid([[0, 0, 1], [1, 1, 1]], 3, 2)

    def test_dunder_operators(self):
        self.assertEqual(self.a & self.b, op_and(self.a, self.b))
        self.assertEqual(self.a | self.b, op_or(self.a, self.b))
        self.assertEqual(self.a ^ self.b, op_xor(self.a, self.b))
        self.assertEqual(~self.a, op_invert(self.a))

    def test_named_methods(self):
        self.assertEqual(self.a.perform_and(self.b), combine(self.a, self.b, operator.and_))
        self.assertEqual(self.a.perform_or(self.b), combine(self.a, self.b, operator.or_))
        self.assertEqual(self.a.perform_xor(self.b), combine(self.a, self.b, operator.xor))
        self.assertEqual(self.a.invert(), map_rows(self.a, operator.not_))

    def test_non_raster_operand(self):
        with self.assertRaises(TypeError):
            self.a & 1  # noqa: B018

    def test_inputs_unchanged(self):
        before_a, before_b = self.a.rows, self.b.rows
        op_xor(self.a, self.b)
        op_invert(self.a)
        self.assertEqual(self.a.rows, before_a)
        self.assertEqual(self.b.rows, before_b)


class TestShapeGuard(unittest.TestCase):
    def test_width_mismatch(self):
        a = RunLengthRaster.from_grid([[1, 0, 1]], 3, 1)
        b = RunLengthRaster.from_grid([[1, 0]], 2, 1)
        with self.assertRaises(ShapeMismatchError) as ctx:
            op_and(a, b)
        self.assertEqual(ctx.exception.dimension, "width")
        self.assertEqual((ctx.exception.left, ctx.exception.right), (3, 2))
        self.assertEqual(a.rows, (((1, 1),),))
        self.assertEqual(b.rows, (((1, 1),),))

    def test_height_mismatch(self):
        a = RunLengthRaster.from_grid([[1, 0], [0, 0]], 2, 2)
        b = RunLengthRaster.from_grid([[1, 0]], 2, 1)
        for fn in (op_and, op_or, op_xor):
            with self.assertRaises(ShapeMismatchError) as ctx:
                fn(a, b)
            self.assertEqual(ctx.exception.dimension, "height")
        self.assertEqual(a.rows, (((1, 1),), ((0, 1),)))

    def test_mismatch_message(self):
        a = RunLengthRaster.from_grid([[1, 0]], 2, 1)
        b = RunLengthRaster.from_grid([[1, 0, 0]], 3, 1)
        with self.assertRaises(ShapeMismatchError) as ctx:
            a ^ b  # noqa: B018
        self.assertIn("width", str(ctx.exception))
