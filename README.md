# densematrix

A small, dependency-free dense matrix of floats. The `densematrix.matrix`
module provides a single class, `Matrix`, with element access, addition,
subtraction, multiplication by a number or by another matrix, transposition,
the determinant (by Gaussian elimination), the inverse (by Gauss-Jordan
elimination), the matrix of algebraic complements, resizing and plain-text
printing.

## Installation

```
pip install .
```

## Usage

```python
from densematrix.matrix import Matrix

m = Matrix.from_rows([
    [2, 5, 7],
    [6, 3, 4],
    [5, -2, -3],
])

print(m.rows, m.cols, m.shape)  # 3 3 (3, 3)
print(m[1, 2])                  # 4.0
m[0, 0] = 2.0

det = m.determinant()           # about -1.0
inv = m.inverse_matrix()        # about [[1, -1, 1], [-38, 41, -34], [27, -29, 24]]
cof = m.calc_complements()      # matrix of algebraic complements

t = m.transpose()
product = m * t                 # matrix product
scaled = m * 3.0                # multiplication by a number
total = m + m
difference = m - m

m.resize(2, 4)                  # keeps the overlapping elements, pads with zeros
m.print()                       # tab-separated rows on standard output
```

### Construction

- `Matrix()` is an empty 0 × 0 matrix.
- `Matrix(rows, cols)` is a zero-filled matrix. A negative size, or both sizes
  below 1, raises `ValueError`; giving only one of the two raises `TypeError`.
- `Matrix.from_rows(rows)` builds a matrix from an iterable of equally long
  rows (values are converted to `float`); rows of different lengths raise
  `ValueError`, and an empty iterable gives an empty matrix.
- `copy()` returns an independent copy and `to_list()` a fresh list of row lists.

### Elements and comparison

Elements are read and written with a `(row, col)` pair: `m[i, j]`. An index
outside the matrix raises `IndexError`; anything other than a pair raises
`TypeError`.

`m == other` (and `m.eq_matrix(other)`) is true when both matrices have the
same shape and every pair of elements differs by at most `1e-7`
(`densematrix.matrix.EPSILON`). Matrices are unhashable.

### In-place operations

`sum_matrix`, `sub_matrix`, `mul_number` and `mul_matrix`, as well as `+=`,
`-=` and `*=`, change the matrix they are called on. `mul_matrix` and a matrix
`*=` give the matrix the shape of the product.

### Errors

Operations on matrices of unsuitable shapes raise `ValueError`: adding or
subtracting matrices of different sizes, multiplying when the column count of
the left operand does not match the row count of the right one, or asking for
the determinant, inverse or complements of a non-square matrix. Inverting or
taking the complements of a matrix whose determinant is zero also raises
`ValueError`, as does `resize` with a size below 1.

### Printing

`str(m)` gives one line per row, each element formatted with `%g` style and
followed by a tab. `m.print()` writes that text to standard output, or to the
text stream passed as `file`.

## Running the tests

```
pip install ".[test]"
pytest
```