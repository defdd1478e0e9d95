import unittest
import numpy as np
import scipy.linalg as la
from scipy.linalg import blas, lapack
import blasargs.scipy_flags as sf
from blasargs.exceptions import InvalidArgumentError


class TestScipyBlasFlags(unittest.TestCase):
    """
    Check the integer flags against what SciPy's BLAS wrappers actually do.
    """

    def setUp(self):
        self.rng = np.random.default_rng(0)

    def test_gemm_trans(self):
        A = self.rng.standard_normal((4, 3))
        B = self.rng.standard_normal((4, 5))
        C = blas.dgemm(1.0, A, B, trans_a=sf.scipy_trans('transpose'))
        self.assertTrue(np.allclose(C, A.T @ B))
        C = blas.dgemm(1.0, A.T, B, trans_a=sf.scipy_trans(False))
        self.assertTrue(np.allclose(C, A.T @ B))

    def test_gemm_conj_trans(self):
        A = self.rng.standard_normal((4, 3)) + 1j * self.rng.standard_normal((4, 3))
        B = self.rng.standard_normal((4, 2)) + 1j * self.rng.standard_normal((4, 2))
        C = blas.zgemm(1.0, A, B, trans_a=sf.scipy_trans('complex_conjugate'))
        self.assertTrue(np.allclose(C, A.conj().T @ B))

    def test_trsm_left_lower_unit(self):
        n = 5
        A = self.rng.standard_normal((n, n)) + n * np.eye(n)
        B = self.rng.standard_normal((n, 3))
        X = blas.dtrsm(1.0, A, B,
                       side=sf.scipy_side('left'),
                       lower=sf.scipy_lower('lower'),
                       diag=sf.scipy_diag('unit'))
        L = np.tril(A, -1) + np.eye(n)
        self.assertTrue(np.allclose(L @ X, B))

    def test_trsm_right_upper_transpose(self):
        n = 4
        A = self.rng.standard_normal((n, n)) + n * np.eye(n)
        B = self.rng.standard_normal((2, n))
        X = blas.dtrsm(1.0, A, B,
                       side=sf.scipy_side('right'),
                       lower=sf.scipy_lower('upper'),
                       trans_a=sf.scipy_trans('transpose'),
                       diag=sf.scipy_diag(None))
        U = np.triu(A)
        self.assertTrue(np.allclose(X @ U.T, B))

    def test_strict_flags_raise(self):
        with self.assertRaises(InvalidArgumentError):
            sf.scipy_side('top')
        with self.assertRaises(InvalidArgumentError):
            sf.scipy_lower('diagonal')
        with self.assertRaises(InvalidArgumentError):
            sf.scipy_trans(True)


class TestScipyLapackFlags(unittest.TestCase):

    def setUp(self):
        self.rng = np.random.default_rng(1)

    def test_geev_compute_vectors(self):
        G = self.rng.standard_normal((5, 5))
        A = G + G.T
        wr, wi, vl, vr, info = lapack.dgeev(A,
                                            compute_vl=sf.scipy_compute_vectors(None),
                                            compute_vr=sf.scipy_compute_vectors('v'))
        self.assertEqual(info, 0)
        self.assertTrue(np.allclose(A @ vr, vr * wr))
        self.assertTrue(np.allclose(np.sort(wr), la.eigvalsh(A)))

    def test_compute_vectors_is_total(self):
        self.assertEqual(sf.scipy_compute_vectors(False), 0)
        self.assertEqual(sf.scipy_compute_vectors('n'), 0)
        self.assertEqual(sf.scipy_compute_vectors('yes'), 1)

    def test_gesvd_all(self):
        A = self.rng.standard_normal((6, 3))
        u, s, vt, info = lapack.dgesvd(A, **sf.scipy_gesvd_flags('all'))
        self.assertEqual(info, 0)
        self.assertEqual(u.shape, (6, 6))
        self.assertEqual(vt.shape, (3, 3))

    def test_gesvd_return(self):
        A = self.rng.standard_normal((6, 3))
        u, s, vt, info = lapack.dgesvd(A, **sf.scipy_gesvd_flags('s'))
        self.assertEqual(info, 0)
        self.assertEqual(u.shape, (6, 3))
        self.assertTrue(np.allclose((u * s) @ vt, A))

    def test_gesvd_none(self):
        A = self.rng.standard_normal((6, 3))
        s = lapack.dgesvd(A, **sf.scipy_gesvd_flags('none'))[1]
        self.assertTrue(np.allclose(s, la.svdvals(A)))

    def test_gesvd_overwrite_warns(self):
        with self.assertWarns(UserWarning):
            flags = sf.scipy_gesvd_flags('overwrite')
        self.assertEqual(flags['overwrite_a'], 1)
        self.assertEqual(flags['full_matrices'], 0)

    def test_gesvd_rejects(self):
        with self.assertRaises(InvalidArgumentError):
            sf.scipy_gesvd_flags('ALL')


class TestNumpyOrder(unittest.TestCase):

    def test_reshape(self):
        buff = np.arange(6)
        A = buff.reshape((2, 3), order=sf.numpy_order('column_major'))
        self.assertTrue(np.array_equal(A, [[0, 2, 4], [1, 3, 5]]))
        A = buff.reshape((2, 3), order=sf.numpy_order('row'))
        self.assertTrue(np.array_equal(A, [[0, 1, 2], [3, 4, 5]]))

    def test_rejects(self):
        with self.assertRaises(InvalidArgumentError):
            sf.numpy_order('F')


if __name__ == '__main__':
    unittest.main()
