# squaremat

A small library for square matrices of real numbers. A `SquareMat` holds an
n × n grid of floats and supports element access, element-wise and matrix
arithmetic, integer powers, transpose and determinant. Errors are raised for
mismatched sizes, bad indices and division or modulo by zero.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from squaremat.matrix import SquareMat

a = SquareMat.from_rows([[1, 2], [3, 4]])
b = SquareMat.from_rows([[5, 6], [7, 8]])
z = SquareMat(3)      # 3 x 3 matrix of zeros

print(a + b)          # element-wise sum
print(a - b)          # element-wise difference
print(a * b)          # matrix product
print(a * 2.0)        # scalar product, also 2.0 * a
print(a / 2.0)        # scalar division
print(a % b)          # element-wise product
print(a % 3)          # element-wise remainder (math.fmod)
print(a ** 2)         # matrix power; a ** 0 is the identity
print(~a)             # transpose, same as a.transpose()
print(-a)             # negation
print(a.determinant())  # -2.0

a[0][1] = 10          # row, then column
a[1, 0] = 5           # or a (row, col) pair
a[0] = [7, 8]         # replace a whole row
a.increment()         # add 1 to every element, in place
a.decrement()         # subtract 1 from every element, in place
a.resize(4)           # new size, all elements reset to zero
```

The in-place forms `+=`, `-=`, `*=`, `/=` and `%=` are supported as well.
`a.size` gives the number of rows, `a.rows()` a copy of the elements as lists,
and `a.copy()` an independent copy.

`str(a)` prints one line per row, each element followed by a space, with
numbers written in `%g` style (`format_number` does the formatting of a single
value).

### Errors

- `ValueError`: a negative size, a non-square input to `from_rows`, a row of
  the wrong length, operations between matrices of different sizes, and a
  negative power.
- `ZeroDivisionError`: dividing by zero or taking a modulo by zero.
- `IndexError`: a row or column index outside the matrix.
- `TypeError`: a non-integer index.

The determinant of an empty (0 × 0) matrix is `0`.

### Comparisons

Equality compares the *sums* of the elements: two matrices of the same size
are equal when their element sums are equal; matrices of different sizes are
never equal. Ordering (`<`, `>`, `<=`, `>=`) compares elements one by one in
row-major order and decides on the first element that differs; comparing
matrices of different sizes raises `ValueError`. Matrices are not hashable.

## Demo

A walkthrough of every operation on two 3 × 3 matrices (elements `i + j` and
`i * j`) is printed by:

```
squaremat-demo
```

The same report is available as a string from `squaremat.demo.render_demo()`.