import pytest

from hornetkit.bits import BitMatrix, BitRef, BitRow, Matrix


def test_bitref_set_and_clear():
    words = [0, 0]
    ref = BitRef(words, 1, 1 << 5)
    assert not ref
    ref.set(True)
    assert words[1] == 1 << 5
    assert bool(ref)
    ref.set(False)
    assert words[1] == 0
    assert not ref


def test_bitref_leaves_other_bits():
    words = [0xFFFFFFFF]
    BitRef(words, 0, 1 << 31).set(False)
    assert words[0] == 0x7FFFFFFF


def test_bitrow_round_trip_across_words():
    words = [0, 0, 0, 0]
    row = BitRow(words, 0, 100)
    for index in (0, 31, 32, 63, 64, 99):
        row[index] = True
    assert [index for index, bit in enumerate(row) if bit] == [0, 31, 32, 63, 64, 99]
    row[32] = False
    assert not row[32]
    assert len(row) == 100


def test_bitrow_index_error():
    words = [0]
    row = BitRow(words, 0, 10)
    with pytest.raises(IndexError):
        row[10]
    with pytest.raises(IndexError):
        row[10] = True
    assert words == [0]
    row[9] = True
    assert words == [1 << 9]


def test_bitmatrix_starts_empty():
    matrix = BitMatrix(3, 40)
    assert matrix.nnz() == 0
    assert all(not bit for row in matrix for bit in row)


def test_bitmatrix_rows_are_independent():
    matrix = BitMatrix(3, 70)
    matrix[0][69] = True
    matrix[1][0] = True
    matrix[2][33] = True
    assert matrix.nnz() == 3
    assert not matrix[1][69]
    assert not matrix[0][0]
    assert bool(matrix[2][33])
    assert not matrix[1][33]


def test_bitmatrix_nnz_counts_all_set_bits():
    matrix = BitMatrix(4, 50)
    positions = [(0, 1), (0, 49), (1, 25), (3, 0), (3, 31), (3, 32)]
    for i, j in positions:
        matrix[i][j] = True
    assert matrix.nnz() == len(positions)
    matrix[0][1] = True
    assert matrix.nnz() == len(positions)


def test_bitmatrix_copy_is_independent():
    matrix = BitMatrix(2, 8)
    matrix[0][3] = True
    duplicate = matrix.copy()
    duplicate[1][4] = True
    assert matrix.nnz() == 1
    assert duplicate.nnz() == 2
    assert bool(duplicate[0][3])


def test_bitmatrix_reset_and_row_reset():
    matrix = BitMatrix(3, 40)
    for i in range(3):
        matrix[i][i] = True
        matrix[i][39] = True
    matrix.row_reset(1)
    assert list(matrix[1]) == [False] * 40
    assert matrix.nnz() == 4
    matrix.reset()
    assert matrix.nnz() == 0


def test_bitmatrix_format():
    matrix = BitMatrix(2, 3)
    matrix[0][1] = True
    assert matrix.format("M") == "M  (2 x 3)\n\n0 1 0 \n0 0 0 \n\nnnz: 1\n\n"


def test_bitmatrix_errors():
    with pytest.raises(ValueError):
        BitMatrix(2, 0)
    with pytest.raises(ValueError):
        BitMatrix(-1, 4)
    matrix = BitMatrix(2, 4)
    with pytest.raises(IndexError):
        matrix[2]
    with pytest.raises(IndexError):
        matrix.row_reset(5)


def test_matrix_fill_and_assignment():
    matrix = Matrix(3, 5, fill=7)
    assert all(list(row) == [7] * 5 for row in matrix)
    matrix[1][4] = 42
    assert matrix[1][4] == 42
    assert matrix[2][0] == 7
    assert len(matrix) == 3
    assert len(matrix[0]) == 5


def test_matrix_copy_is_independent():
    matrix = Matrix(2, 3)
    matrix[0][0] = 9
    duplicate = matrix.copy()
    duplicate[0][0] = 1
    assert matrix[0][0] == 9
    assert duplicate[0][0] == 1


def test_matrix_format():
    matrix = Matrix(2, 2)
    matrix[0][1] = 5
    assert matrix.format() == "0 5 \n0 0 \n\n"


def test_matrix_errors():
    with pytest.raises(ValueError):
        Matrix(1, 0)
    matrix = Matrix(2, 3)
    with pytest.raises(IndexError):
        matrix[3]
    with pytest.raises(IndexError):
        matrix[0][3]
    with pytest.raises(IndexError):
        matrix[0][3] = 1