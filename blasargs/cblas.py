"""
CBLAS enumerated constants, and translators from symbolic arguments to them.

The magnitudes are the ones in the reference cblas.h. LAPACKE reuses the
storage order magnitudes (LAPACK_ROW_MAJOR = 101, LAPACK_COL_MAJOR = 102),
so blas_order serves both calling conventions.
"""
from enum import IntEnum
from blasargs.enums import Layout, Op, Uplo, Diag, Side
from blasargs.parsing import parse_op, parse_side, parse_uplo, parse_diag, parse_layout
from blasargs.misc import set_docstring, STRICT_DOC, TOTAL_DOC


class CBLAS_ORDER(IntEnum):
    CblasRowMajor = 101
    CblasColMajor = 102


class CBLAS_TRANSPOSE(IntEnum):
    CblasNoTrans = 111
    CblasTrans = 112
    CblasConjTrans = 113


class CBLAS_UPLO(IntEnum):
    CblasUpper = 121
    CblasLower = 122


class CBLAS_DIAG(IntEnum):
    CblasNonUnit = 131
    CblasUnit = 132


class CBLAS_SIDE(IntEnum):
    CblasLeft = 141
    CblasRight = 142


LAPACK_ROW_MAJOR = int(CBLAS_ORDER.CblasRowMajor)
LAPACK_COL_MAJOR = int(CBLAS_ORDER.CblasColMajor)


ORDER_CODES = {
    Layout.RowMajor: CBLAS_ORDER.CblasRowMajor,
    Layout.ColMajor: CBLAS_ORDER.CblasColMajor,
}

TRANSPOSE_CODES = {
    Op.NoTrans: CBLAS_TRANSPOSE.CblasNoTrans,
    Op.Trans: CBLAS_TRANSPOSE.CblasTrans,
    Op.ConjTrans: CBLAS_TRANSPOSE.CblasConjTrans,
}

UPLO_CODES = {
    Uplo.Upper: CBLAS_UPLO.CblasUpper,
    Uplo.Lower: CBLAS_UPLO.CblasLower,
}

DIAG_CODES = {
    Diag.NonUnit: CBLAS_DIAG.CblasNonUnit,
    Diag.Unit: CBLAS_DIAG.CblasUnit,
}

SIDE_CODES = {
    Side.Left: CBLAS_SIDE.CblasLeft,
    Side.Right: CBLAS_SIDE.CblasRight,
}


@set_docstring(STRICT_DOC, kind='transpose', target='a CBLAS_TRANSPOSE constant',
               param='op', codes='CBLAS_TRANSPOSE',
               accepts='None, False, "no_transpose", "transpose", "complex_conjugate" or an Op')
def blas_transpose(op) -> CBLAS_TRANSPOSE:
    return TRANSPOSE_CODES[parse_op(op)]


@set_docstring(STRICT_DOC, kind='side', target='a CBLAS_SIDE constant',
               param='side', codes='CBLAS_SIDE', accepts='"left", "right" or a Side')
def blas_side(side) -> CBLAS_SIDE:
    return SIDE_CODES[parse_side(side)]


@set_docstring(STRICT_DOC, kind='triangle', target='a CBLAS_UPLO constant',
               param='uplo', codes='CBLAS_UPLO', accepts='"upper", "lower" or an Uplo')
def blas_uplo(uplo) -> CBLAS_UPLO:
    return UPLO_CODES[parse_uplo(uplo)]


@set_docstring(TOTAL_DOC, kind='diagonal', target='a CBLAS_DIAG constant',
               param='diag', codes='CBLAS_DIAG', default='CblasNonUnit',
               rule='"unit", True or Diag.Unit give CblasUnit.')
def blas_diag(diag) -> CBLAS_DIAG:
    return DIAG_CODES[parse_diag(diag)]


@set_docstring(STRICT_DOC, kind='storage order', target='a CBLAS_ORDER constant',
               param='order', codes='CBLAS_ORDER',
               accepts='"row", "row_major", "col", "col_major", "column", "column_major" or a Layout')
def blas_order(order) -> CBLAS_ORDER:
    return ORDER_CODES[parse_layout(order)]
