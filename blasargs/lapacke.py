"""
Translators from symbolic arguments to LAPACK character codes.

LAPACK (and LAPACKE) select behavior with single characters rather than
the CBLAS enums. The storage order is the exception: LAPACKE takes the same
101/102 magnitudes as CBLAS, see blasargs.cblas.blas_order.
"""
from blasargs.enums import Op, Uplo, Diag, Side, SVDJob, EVDJob
from blasargs.parsing import parse_op, parse_side, parse_uplo, parse_diag, \
    parse_svd_job, parse_evd_job
from blasargs.misc import set_docstring, STRICT_DOC, TOTAL_DOC


TRANSPOSE_CHARS = {
    Op.NoTrans: 'N',
    Op.Trans: 'T',
    Op.ConjTrans: 'C',
}

UPLO_CHARS = {
    Uplo.Upper: 'U',
    Uplo.Lower: 'L',
}

SIDE_CHARS = {
    Side.Left: 'L',
    Side.Right: 'R',
}

DIAG_CHARS = {
    Diag.NonUnit: 'N',
    Diag.Unit: 'U',
}

SVD_JOB_CHARS = {
    SVDJob.All: 'A',
    SVDJob.Return: 'S',
    SVDJob.Overwrite: 'O',
    SVDJob.NoJob: 'N',
}

EVD_JOB_CHARS = {
    EVDJob.NoVectors: 'N',
    EVDJob.Vectors: 'V',
}


@set_docstring(STRICT_DOC, kind='transpose', target="a LAPACK trans character",
               param='op', codes="'N', 'T' or 'C'",
               accepts='None, False, "no_transpose", "transpose", "complex_conjugate" or an Op')
def lapacke_transpose(op) -> str:
    return TRANSPOSE_CHARS[parse_op(op)]


@set_docstring(STRICT_DOC, kind='triangle', target="a LAPACK uplo character",
               param='uplo', codes="'U' or 'L'", accepts='"upper", "lower" or an Uplo')
def lapacke_uplo(uplo) -> str:
    return UPLO_CHARS[parse_uplo(uplo)]


@set_docstring(STRICT_DOC, kind='side', target="a LAPACK side character",
               param='side', codes="'L' or 'R'", accepts='"left", "right" or a Side')
def lapacke_side(side) -> str:
    return SIDE_CHARS[parse_side(side)]


@set_docstring(TOTAL_DOC, kind='diagonal', target="a LAPACK diag character",
               param='diag', codes="'U' or 'N'", default="'N'",
               rule='"unit", True or Diag.Unit give \'U\'.')
def lapacke_diag(diag) -> str:
    return DIAG_CHARS[parse_diag(diag)]


def lapack_svd_job(job, name='job') -> str:
    """
    Interpret a jobu / jobvt argument for ?gesvd.

    Parameters
    ----------
    job : str or SVDJob
        "all" or "a" : compute the full factor ('A').

        "return" or "s" : compute the economy-sized factor and return it ('S').

        "overwrite" or "o" : write the economy-sized factor over the input
        matrix instead of into new storage ('O').

        "none" or "n" : don't compute the factor ('N').

    name : str
        Argument name used in the error message, e.g. "jobu".

    Returns
    -------
    code : str
        One of 'A', 'S', 'O', 'N'.

    Raises
    ------
    InvalidArgumentError
        If "job" isn't one of the eight spellings above. Matching is
        case-sensitive, so "ALL" is rejected.
    """
    return SVD_JOB_CHARS[parse_svd_job(job, name)]


def lapack_evd_job(job) -> str:
    """
    Interpret a jobvl / jobvr argument for ?geev.

    Returns 'N' (skip the eigenvectors) for None, False or "n", and 'V'
    (compute them) for anything else, "none" included. This never raises.
    """
    return EVD_JOB_CHARS[parse_evd_job(job)]
