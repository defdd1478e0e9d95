__version__ = '0.1.0'

from blasargs.enums import Layout, Op, Uplo, Diag, Side, SVDJob, EVDJob
from blasargs.exceptions import InvalidArgumentError
from blasargs.parsing import parse_op, parse_side, parse_uplo, parse_diag, \
    parse_layout, parse_svd_job, parse_evd_job
from blasargs.cblas import CBLAS_ORDER, CBLAS_TRANSPOSE, CBLAS_UPLO, \
    CBLAS_DIAG, CBLAS_SIDE, LAPACK_ROW_MAJOR, LAPACK_COL_MAJOR, \
    blas_transpose, blas_side, blas_uplo, blas_diag, blas_order
from blasargs.lapacke import lapacke_transpose, lapacke_uplo, lapacke_side, \
    lapacke_diag, lapack_svd_job, lapack_evd_job
from blasargs.scipy_flags import scipy_trans, scipy_side, scipy_lower, \
    scipy_diag, scipy_compute_vectors, scipy_gesvd_flags, numpy_order
