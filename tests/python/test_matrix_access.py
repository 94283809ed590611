import copy
import pickle
import unittest

import numpy as np

import pymatrix
from pymatrix import Matrix, ShapeError, SquareMatrix


def setup_3x2():
    return Matrix([[1, 2], [3, 4], [5, 6]])


class TestConstruction(unittest.TestCase):
    def test_shape_is_part_of_the_class(self):
        m = setup_3x2()
        self.assertIs(type(m), Matrix.shaped(3, 2))
        self.assertEqual(type(m).__name__, "Matrix3x2")
        self.assertEqual(m.shape, (3, 2))
        self.assertEqual(m.rows(), 3)
        self.assertEqual(m.cols(), 2)
        self.assertFalse(m.is_square)
        self.assertEqual(set(vars(m)), {"_data"})

    def test_shaped_classes_are_cached(self):
        self.assertIs(Matrix.shaped(2, 5), Matrix.shaped(2, 5))
        self.assertIsNot(Matrix.shaped(2, 5), Matrix.shaped(5, 2))

    def test_square_shapes_get_row_operations(self):
        sq = Matrix([[1, 2], [3, 4]])
        self.assertIsInstance(sq, SquareMatrix)
        self.assertTrue(sq.is_square)
        self.assertFalse(hasattr(setup_3x2(), "transvect"))
        self.assertFalse(hasattr(Matrix.shaped(3, 2), "identity"))

    def test_shaped_class_checks_data(self):
        cls = Matrix.shaped(3, 2)
        self.assertEqual(cls([[1, 2], [3, 4], [5, 6]]), setup_3x2())
        with self.assertRaises(ShapeError):
            cls([[1, 2, 3], [4, 5, 6]])

    def test_square_matrix_rejects_rectangular_data(self):
        with self.assertRaises(ShapeError):
            SquareMatrix([[1, 2, 3]])

    def test_rejects_bad_data(self):
        with self.assertRaises(ShapeError):
            Matrix([[1, 2], [3]])
        with self.assertRaises(ShapeError):
            Matrix([])
        with self.assertRaises(ShapeError):
            Matrix([[]])
        with self.assertRaises(TypeError):
            Matrix(5)
        with self.assertRaises(TypeError):
            Matrix("ab")
        with self.assertRaises(TypeError):
            Matrix([1, 2])

    def test_rejects_bad_dimensions(self):
        with self.assertRaises(ShapeError):
            Matrix.shaped(0, 2)
        with self.assertRaises(TypeError):
            Matrix.shaped(2.0, 2)

    def test_tuples_and_from_rows(self):
        m = Matrix.from_rows(((1, 2), (3, 4), (5, 6)))
        self.assertEqual(m, setup_3x2())
        self.assertEqual(pymatrix.matrix([[1, 2], [3, 4], [5, 6]]), m)

    def test_construction_copies_input(self):
        data = [[1, 2], [3, 4]]
        m = Matrix(data)
        data[0][0] = 99
        self.assertEqual(m.get(0, 0), 1)

    def test_from_matrix_like(self):
        m = setup_3x2()
        m2 = Matrix(m)
        self.assertEqual(m2, m)
        self.assertIsNot(m2, m)
        m2[0, 0] = 42
        self.assertEqual(m.get(0, 0), 1)


class TestAccess(unittest.TestCase):
    def test_round_trip_through_get(self):
        literal = [[1, 2], [3, 4], [5, 6]]
        m = Matrix(literal)
        for i, row in enumerate(literal):
            for j, value in enumerate(row):
                self.assertEqual(m.get(i, j), value)
        self.assertEqual(m.to_list(), literal)

    def test_get_out_of_range_is_none(self):
        m = setup_3x2()
        self.assertIsNone(m.get(3, 0))
        self.assertIsNone(m.get(0, 2))
        self.assertIsNone(m.get(-1, 0))
        self.assertIsNone(m.get(0, -1))

    def test_get_mut(self):
        m = setup_3x2()
        ref = m.get_mut(1, 1)
        self.assertEqual(ref.value, 4)
        self.assertEqual(ref.position, (1, 1))
        ref.value = 10
        self.assertEqual(m.get(1, 1), 10)
        self.assertIsNone(m.get_mut(5, 0))
        self.assertIsNone(m.get_mut(0, 2))

    def test_get_line(self):
        m = setup_3x2()
        line = m.get_line(1)
        self.assertEqual(line, [3, 4])
        self.assertEqual(len(line), 2)
        self.assertEqual(line[1], 4)
        self.assertIsNone(m.get_line(3))
        self.assertIsNone(m.get_line(-1))

    def test_read_only_line_rejects_writes(self):
        line = setup_3x2().get_line(0)
        with self.assertRaises(TypeError):
            line[0] = 9

    def test_get_mut_line(self):
        m = setup_3x2()
        line = m.get_mut_line(0)
        line[1] = 7
        self.assertEqual(m.to_list(), [[1, 7], [3, 4], [5, 6]])
        line[:] = [8, 9]
        self.assertEqual(m.get_line(0), [8, 9])
        with self.assertRaises(ValueError):
            line[:] = [1, 2, 3]
        self.assertIsNone(m.get_mut_line(3))

    def test_lines_in_storage_order(self):
        m = setup_3x2()
        self.assertEqual([line.to_list() for line in m.lines()], [[1, 2], [3, 4], [5, 6]])
        # A fresh iterator each call; storage is not consumed.
        self.assertEqual(len(list(m.lines())), 3)
        self.assertEqual([line.position for line in m], [0, 1, 2])

    def test_mut_lines(self):
        m = setup_3x2()
        for line in m.mut_lines():
            line[0] = 0
        self.assertEqual(m.to_list(), [[0, 2], [0, 4], [0, 6]])

    def test_numpy_integer_indices(self):
        m = Matrix([[1, 2], [3, 4]])
        i = np.int64(1)
        self.assertEqual(m.get(i, 0), 3)
        self.assertEqual(m.get(np.intp(0), np.int32(1)), 2)
        self.assertEqual(m.get_line(i), [3, 4])
        m.get_mut(i, i).value = 40
        self.assertEqual(m[i, i], 40)
        m.get_mut_line(np.int8(0))[0] = 10
        self.assertEqual(m.get(0, 0), 10)
        self.assertIsNone(m.get(np.int64(2), 0))
        m.permute(i, 0)
        self.assertEqual(m.get(i, 0), 10)

    def test_non_integer_indices_raise(self):
        m = setup_3x2()
        with self.assertRaises(TypeError):
            m.get(1.0, 0)
        with self.assertRaises(TypeError):
            m.get_line(True)
        with self.assertRaises(TypeError):
            m[True, 0]

    def test_row_views_reject_negative_columns(self):
        m = setup_3x2()
        line = m.get_mut_line(0)
        with self.assertRaises(IndexError):
            line[-1] = 9
        with self.assertRaises(IndexError):
            line[-1]
        with self.assertRaises(IndexError):
            m.get_line(1)[2]
        self.assertEqual(m, setup_3x2())

    def test_item_access(self):
        m = setup_3x2()
        self.assertEqual(m[2, 1], 6)
        m[2, 1] = 60
        self.assertEqual(m.get(2, 1), 60)
        with self.assertRaises(IndexError):
            m[3, 0]
        with self.assertRaises(TypeError):
            m[0]


class TestValueSemantics(unittest.TestCase):
    def test_structural_equality(self):
        self.assertEqual(setup_3x2(), setup_3x2())
        self.assertNotEqual(setup_3x2(), Matrix([[1, 2], [3, 4], [5, 7]]))

    def test_different_shapes_are_never_equal(self):
        self.assertNotEqual(Matrix([[1, 2]]), Matrix([[1], [2]]))

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(setup_3x2())

    def test_copy_is_independent(self):
        m = setup_3x2()
        for dup in (m.copy(), copy.copy(m)):
            self.assertEqual(dup, m)
            self.assertIs(type(dup), type(m))
            dup[0, 0] = 100
            self.assertEqual(m.get(0, 0), 1)

    def test_pickle_round_trip(self):
        m = setup_3x2()
        restored = pickle.loads(pickle.dumps(m))
        self.assertEqual(restored, m)
        self.assertIs(type(restored), Matrix.shaped(3, 2))


if __name__ == "__main__":
    unittest.main()
