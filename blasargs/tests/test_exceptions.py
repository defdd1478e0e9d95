import unittest
import blasargs
from blasargs.exceptions import InvalidArgumentError


class TestInvalidArgumentError(unittest.TestCase):

    def test_is_value_error(self):
        with self.assertRaises(ValueError):
            blasargs.blas_side('top')

    def test_attributes(self):
        err = InvalidArgumentError('jobvt', ['all', 'none'], 'some')
        self.assertEqual(err.kind, 'jobvt')
        self.assertEqual(err.accepted, ('all', 'none'))
        self.assertEqual(err.value, 'some')
        self.assertEqual(str(err), "Expected all or none for jobvt argument, got 'some'.")

    def test_long_vocabulary_message(self):
        err = InvalidArgumentError('trans', ('false', 'transpose', 'complex_conjugate'), 0)
        self.assertEqual(str(err),
                         'Expected false, transpose, or complex_conjugate for trans argument, got 0.')

    def test_package_exports(self):
        self.assertIs(blasargs.InvalidArgumentError, InvalidArgumentError)
        self.assertEqual(blasargs.lapacke_uplo('upper'), 'U')
        self.assertEqual(blasargs.blas_uplo('upper'), blasargs.CBLAS_UPLO.CblasUpper)


if __name__ == '__main__':
    unittest.main()
