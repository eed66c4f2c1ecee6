# kgtmath

Small vector and matrix types of floats with no dependencies. Arithmetic works element by element. The package also provides dot products, transposition, resizing and lexicographic comparison.

## Install

    pip install .

## Vectors

```python
from kgtmath.vector import Vector

a = Vector([1.0, 2.0, 3.0])
b = Vector.zeros(3)

a + b          # element-wise; sizes must match, otherwise ValueError
a * 2.0        # a scalar is applied to every element
a / 0.0        # division follows IEEE 754: inf, -inf or nan, no exception
a.dot(a)       # 14.0
a.resized(5)   # copy, truncated or zero-padded to 5 elements
a.apply(abs)   # new vector with the function applied to each element
a[1] = 7.0     # elements are read and set by index
print(a)       # [ 1.00000, 7.00000, 3.00000]
```

Each element prints in the fixed form `%8.5f`, and the elements are separated by commas. Vectors compare lexicographically. When one vector is a prefix of the other, the longer one is the greater. Vectors cannot be hashed.

A dimension must be below `kgtmath.vector.MAX_DIM` (2**20). A negative or larger dimension raises `ValueError`.

## Matrices

```python
from kgtmath.matrix import Matrix
from kgtmath.vector import Vector

m = Matrix([[1.0, 2.0], [3.0, 4.0]])
m.rows, m.cols             # (2, 2)
m[0, 1]                    # 2.0
m[0]                       # a copy of row 0, as a Vector
m[1] = [5.0, 6.0]          # replace a whole row (its length must be m.cols)
m.transpose()
m.dot(m)                   # matrix product
m.dot(Vector([1.0, 1.0]))  # matrix-vector product, gives a Vector
m + Vector([10.0, 20.0])   # adds 10 to row 0 and 20 to row 1
m * 2.0                    # scalar applied to every element
m.resized(3, 1)            # truncated or zero-padded copy
m.apply(abs)
```

`Matrix.zeros(rows, cols)` builds a matrix of zeros. All rows given to `Matrix(...)` must have the same length. A row count, a column count and an element count (rows × cols) must each be below 2**20. Shape mismatches raise `ValueError`.

Iterating over a matrix yields copies of its rows. Matrices compare row by row in lexicographic order, the same way vectors do.

## Output

`write(stream)` writes a vector or a matrix to a text stream. It uses the same format that `str()` returns. A matrix prints as its row vectors inside brackets, one row per line:

```
[[ 1.00000, 2.00000],
 [ 3.00000, 4.00000]]
```

## Random scalars

```python
from kgtmath.scalar import random_scalar

random_scalar(-1.0, 1.0)   # a uniformly distributed float between -1.0 and 1.0
```

`random_scalar` raises `ValueError` when the lower bound exceeds the upper bound.

## What it does not do

This package is a library only. It has no command-line tool, and it does not save or load data in any file format.

## Tests

    pip install .[test]
    pytest